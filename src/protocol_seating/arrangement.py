"""
Single row protocol arrangement.

Regular guests are ranked by gradation number and seated alternately
left and right of the chief guest, best rank nearest:

    ... G5 G3 G1 [Chief] G2 G4 G6 ...

Custom guests without a reference then grow the row at alternate ends
(front first), and custom guests with a reference are spliced in next to
the guest they point at.
"""
from __future__ import annotations

import logging
import sys
from typing import Dict, Iterable, List, Optional

from .models import ArrangementResult, BeforeAfter, Guest, GuestRole, SpousePosition

LOGGER = logging.getLogger(__name__)

SPOUSE_PREFIX = "Spouse of "
CHIEF_GUEST_ERROR = "Exactly one Chief Guest is required."

# Only used inside sort keys. A missing gradation never leaves this module.
_UNRANKED = sys.maxsize


def spouse_label(name: str) -> str:
    return f"{SPOUSE_PREFIX}{name}"


def with_optional_spouse(name: str, spouse_position: SpousePosition) -> List[str]:
    """Return the seats taken by a guest and, when present, their spouse."""
    if spouse_position == SpousePosition.BEFORE:
        return [spouse_label(name), name]
    if spouse_position == SpousePosition.AFTER:
        return [name, spouse_label(name)]
    return [name]


def _gradation_key(guest: Guest) -> int:
    return _UNRANKED if guest.gradation_no is None else guest.gradation_no


def _seats(guest: Guest) -> List[str]:
    return with_optional_spouse(guest.name, guest.spouse_position)


def _around_chief(chief: Guest, regulars: List[Guest]) -> List[str]:
    """Alternate ranked regulars left then right of the chief."""
    left: List[List[str]] = []
    right: List[List[str]] = []
    for index, guest in enumerate(regulars):
        if index % 2 == 0:
            left.append(_seats(guest))
        else:
            right.append(_seats(guest))

    row: List[str] = []
    # left holds nearest first, the row reads farthest first
    for seats in reversed(left):
        row.extend(seats)
    row.extend(_seats(chief))
    for seats in right:
        row.extend(seats)
    return row


def _place_at_ends(row: List[str], customs: List[Guest]) -> None:
    for index, guest in enumerate(customs):
        if index % 2 == 0:
            row[:0] = _seats(guest)
        else:
            row.extend(_seats(guest))


def _place_by_reference(row: List[str], customs: List[Guest], by_id: Dict[str, Guest]) -> None:
    """Splice each custom guest beside its reference, one at a time.

    Every lookup scans the row as it stands after the previous insertion,
    so a custom guest may anchor on one placed just before it. The anchor
    is the first seat carrying the referenced guest's name.
    """
    for guest in customs:
        seats = _seats(guest)
        ref = by_id.get(guest.reference_id or "")
        anchor: Optional[int] = None
        if ref is not None and guest.before_after is not None and ref.name in row:
            anchor = row.index(ref.name)

        if anchor is None:
            LOGGER.debug("No anchor for %r (reference %r), appending", guest.name, guest.reference_id)
            row.extend(seats)
            continue

        at = anchor if guest.before_after == BeforeAfter.BEFORE else anchor + 1
        row[at:at] = seats


def build_arrangement(guests: Iterable[Guest]) -> ArrangementResult:
    """Order ``guests`` into a row of seat labels.

    Returns an empty arrangement with ``error`` set unless exactly one
    guest is the chief guest. Every other irregularity (missing gradation,
    dangling reference, duplicate names) still yields a best effort row.
    """
    guests = list(guests)
    chiefs = [g for g in guests if g.role == GuestRole.CHIEF_GUEST]
    if len(chiefs) != 1:
        LOGGER.debug("Found %d chief guests, need exactly one", len(chiefs))
        return ArrangementResult(arrangement=[], error=CHIEF_GUEST_ERROR)
    chief = chiefs[0]

    # sorted() is stable: equal ranks keep their input order
    regulars = sorted((g for g in guests if g.role == GuestRole.REGULAR), key=_gradation_key)
    row = _around_chief(chief, regulars)

    customs = [g for g in guests if g.role == GuestRole.CUSTOM]
    unreferenced = sorted((g for g in customs if not g.reference_id), key=_gradation_key)
    _place_at_ends(row, unreferenced)

    referenced = sorted((g for g in customs if g.reference_id), key=lambda g: g.id)
    by_id: Dict[str, Guest] = {}
    for g in guests:
        by_id.setdefault(g.id, g)
    _place_by_reference(row, referenced, by_id)

    LOGGER.debug(
        "Arranged %d seats: %d regular, %d custom",
        len(row), len(regulars), len(customs),
    )
    return ArrangementResult(arrangement=row)
