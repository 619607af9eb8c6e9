"""Data models for protocol seating."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional
import math


class GuestRole(str, Enum):
    REGULAR = "Regular"
    CHIEF_GUEST = "Chief Guest"
    CUSTOM = "Custom"


class SpousePosition(str, Enum):
    NONE = "N/A"
    BEFORE = "Before"
    AFTER = "After"


class BeforeAfter(str, Enum):
    BEFORE = "Before"
    AFTER = "After"


_ROLE_ALIASES = {
    "regular": GuestRole.REGULAR,
    "chief guest": GuestRole.CHIEF_GUEST,
    "chiefguest": GuestRole.CHIEF_GUEST,
    "chief": GuestRole.CHIEF_GUEST,
    "custom": GuestRole.CUSTOM,
}

_SPOUSE_ALIASES = {
    "n/a": SpousePosition.NONE,
    "none": SpousePosition.NONE,
    "before": SpousePosition.BEFORE,
    "after": SpousePosition.AFTER,
}


def _is_missing(value: object) -> bool:
    """Return True for ``None``, blank strings and pandas' ``nan``."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    text = str(value).strip()
    return not text or text.lower() == "nan"


def parse_optional_str(value: object) -> Optional[str]:
    """Return the stripped text, or ``None`` for an empty cell."""
    if _is_missing(value):
        return None
    return str(value).strip()


def parse_optional_int(value: object) -> Optional[int]:
    """Parse a gradation number.

    ``pandas`` reads an integer column with gaps as floats, so ``3.0`` is
    accepted. Fractional values are rejected.
    """
    if _is_missing(value):
        return None
    number = float(str(value).strip())
    if not number.is_integer():
        raise ValueError(f"Expected a whole number, got {value!r}")
    return int(number)


def parse_role(value: object) -> GuestRole:
    if isinstance(value, GuestRole):
        return value
    key = "" if _is_missing(value) else str(value).strip().lower()
    try:
        return _ROLE_ALIASES[key]
    except KeyError:
        raise ValueError(f"Unknown guest role: {value!r}") from None


def parse_spouse_position(value: object) -> SpousePosition:
    """Missing values mean no spouse."""
    if isinstance(value, SpousePosition):
        return value
    if _is_missing(value):
        return SpousePosition.NONE
    try:
        return _SPOUSE_ALIASES[str(value).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown spouse position: {value!r}") from None


def parse_before_after(value: object) -> Optional[BeforeAfter]:
    if isinstance(value, BeforeAfter):
        return value
    if _is_missing(value):
        return None
    text = str(value).strip().lower()
    if text == "before":
        return BeforeAfter.BEFORE
    if text == "after":
        return BeforeAfter.AFTER
    raise ValueError(f"Expected Before or After, got {value!r}")


@dataclass
class Guest:
    """A participant to be seated in the row.

    Placement only looks at ``name``, ``role``, ``gradation_no``,
    ``reference_id``, ``before_after`` and ``spouse_position``. ``bd_no``
    and ``date_commission`` are carried for display.
    """

    id: str
    name: str
    role: GuestRole = GuestRole.REGULAR
    spouse_position: SpousePosition = SpousePosition.NONE
    gradation_no: Optional[int] = None
    reference_id: Optional[str] = None
    before_after: Optional[BeforeAfter] = None
    bd_no: str = ""
    date_commission: str = ""


@dataclass
class ArrangementResult:
    """Seat labels left to right, or an error with no seats."""

    arrangement: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class SerialNumbers:
    serial_numbers: List[int] = field(default_factory=list)
    chief_index: Optional[int] = None


def clean_guest(guest: Guest) -> Guest:
    """Normalize a guest the way the guest editor does before saving.

    Names and service numbers are trimmed. Only regular and custom guests
    keep a gradation number, and only custom guests keep their relative
    placement fields.
    """
    role = guest.role
    keeps_gradation = role in (GuestRole.REGULAR, GuestRole.CUSTOM)
    is_custom = role == GuestRole.CUSTOM
    return replace(
        guest,
        name=guest.name.strip(),
        bd_no=guest.bd_no.strip(),
        date_commission=guest.date_commission or "",
        gradation_no=guest.gradation_no if keeps_gradation else None,
        reference_id=guest.reference_id if is_custom else None,
        before_after=guest.before_after if is_custom else None,
    )


def is_valid_guest(guest: Guest) -> bool:
    """A guest needs a name, and a regular guest needs a gradation number."""
    if not guest.name.strip():
        return False
    if guest.role == GuestRole.REGULAR and guest.gradation_no is None:
        return False
    return True
