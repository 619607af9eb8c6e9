"""Seating plan: arrangement plus serial numbers, ready for display."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import pandas as pd

from .arrangement import build_arrangement
from .models import Guest
from .serials import compute_serial_numbers, display_serial

DEFAULT_TITLE = "Seating Plan"
PLAN_COLUMNS = ["seat", "serial", "label"]


@dataclass
class SeatingPlan:
    title: str = DEFAULT_TITLE
    arrangement: List[str] = field(default_factory=list)
    serial_numbers: List[int] = field(default_factory=list)
    chief_index: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_frame(self) -> pd.DataFrame:
        """One row per seat, left to right, with the display serial."""
        if not self.arrangement:
            return pd.DataFrame(columns=PLAN_COLUMNS)
        serials = self.serial_numbers or [0] * len(self.arrangement)
        return pd.DataFrame(
            {
                "seat": range(1, len(self.arrangement) + 1),
                "serial": [display_serial(s) for s in serials],
                "label": self.arrangement,
            },
            columns=PLAN_COLUMNS,
        )


def build_plan(guests: Iterable[Guest], title: str = DEFAULT_TITLE) -> SeatingPlan:
    """Run the arrangement, then the numbering on its output."""
    guests = list(guests)
    result = build_arrangement(guests)
    if result.error:
        return SeatingPlan(title=title, error=result.error)
    numbering = compute_serial_numbers(guests, result.arrangement)
    return SeatingPlan(
        title=title,
        arrangement=result.arrangement,
        serial_numbers=numbering.serial_numbers,
        chief_index=numbering.chief_index,
    )


def format_plan(plan: SeatingPlan) -> str:
    """Render the plan as a title over two aligned rows: serials, then labels."""
    title = plan.title or DEFAULT_TITLE
    if not plan.ok:
        return f'{title}\n{plan.error} (Set one guest to "Chief Guest".)'
    frame = plan.to_frame()
    widths = [max(len(s), len(label)) for s, label in zip(frame["serial"], frame["label"])]
    serial_row = " | ".join(s.center(w) for s, w in zip(frame["serial"], widths))
    label_row = " | ".join(label.center(w) for label, w in zip(frame["label"], widths))
    return "\n".join([title, serial_row, label_row])
