"""Protocol seating package."""
from .models import (
    ArrangementResult,
    BeforeAfter,
    Guest,
    GuestRole,
    SerialNumbers,
    SpousePosition,
    clean_guest,
    is_valid_guest,
)
from .arrangement import build_arrangement, spouse_label, with_optional_spouse
from .serials import compute_serial_numbers, display_serial
from .plan import SeatingPlan, build_plan, format_plan
from .csv_loader import load_guests, save_plan

__all__ = [
    "ArrangementResult",
    "BeforeAfter",
    "Guest",
    "GuestRole",
    "SerialNumbers",
    "SpousePosition",
    "clean_guest",
    "is_valid_guest",
    "build_arrangement",
    "spouse_label",
    "with_optional_spouse",
    "compute_serial_numbers",
    "display_serial",
    "SeatingPlan",
    "build_plan",
    "format_plan",
    "load_guests",
    "save_plan",
]
