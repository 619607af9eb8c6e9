"""CSV loading utilities."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, List

import pandas as pd

from .models import (
    Guest,
    clean_guest,
    is_valid_guest,
    parse_before_after,
    parse_optional_int,
    parse_optional_str,
    parse_role,
    parse_spouse_position,
)
from .plan import SeatingPlan

LOGGER = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["id", "name", "role"]


def load_guests(path: Path | str | IO[Any]) -> List[Guest]:
    """Load guests from ``guests.csv``.

    Rows without a name, or regular guests without a gradation number, are
    skipped. A ``reference_id`` naming no guest is kept: the arrangement
    appends such guests at the end of the row.
    """
    df = pd.read_csv(path, dtype={"id": str, "reference_id": str, "bd_no": str})
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"guests.csv is missing columns: {', '.join(missing)}")

    guests: List[Guest] = []
    for index, row in df.iterrows():
        guest = clean_guest(
            Guest(
                id=str(row["id"]).strip(),
                name=parse_optional_str(row["name"]) or "",
                role=parse_role(row["role"]),
                spouse_position=parse_spouse_position(row.get("spouse_position")),
                gradation_no=parse_optional_int(row.get("gradation_no")),
                reference_id=parse_optional_str(row.get("reference_id")),
                before_after=parse_before_after(row.get("before_after")),
                bd_no=parse_optional_str(row.get("bd_no")) or "",
                date_commission=parse_optional_str(row.get("date_commission")) or "",
            )
        )
        if not is_valid_guest(guest):
            # header is line 1
            LOGGER.warning("Skipping incomplete guest on line %d: %r", index + 2, guest.name)
            continue
        guests.append(guest)

    seen = set()
    for g in guests:
        if g.id in seen:
            raise ValueError(f"Duplicate guest id: {g.id}")
        seen.add(g.id)

    for g in guests:
        if g.reference_id and g.reference_id not in seen:
            LOGGER.warning("%s references unknown guest %s; it will be seated at the end", g.name, g.reference_id)
    LOGGER.info("Loaded %d guests", len(guests))
    return guests


def save_plan(plan: SeatingPlan, path: Path | str) -> Path:
    """Write one row per seat: seat, serial, label."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    plan.to_frame().to_csv(out, index=False)
    return out
