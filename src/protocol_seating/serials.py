"""Serial numbers radiating out from the chief guest."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .arrangement import spouse_label
from .models import Guest, GuestRole, SerialNumbers, SpousePosition

LOGGER = logging.getLogger(__name__)


def compute_serial_numbers(guests: Iterable[Guest], arrangement: Sequence[str]) -> SerialNumbers:
    """Number each seat by its distance from the chief guest.

    The chief's seat is 0 and the two seats ``d`` places away on either
    side both get ``d``. A spouse seated right beside the chief is also 0.
    Without a chief guest, or when the chief's name is not in the row, the
    result is empty with ``chief_index`` set to ``None``.
    """
    chief = next((g for g in guests if g.role == GuestRole.CHIEF_GUEST), None)
    if chief is None or chief.name not in arrangement:
        return SerialNumbers(serial_numbers=[], chief_index=None)

    chief_index = list(arrangement).index(chief.name)
    total = len(arrangement)
    serials: List[int] = [0] * total
    for distance in range(1, max(chief_index, total - 1 - chief_index) + 1):
        if chief_index - distance >= 0:
            serials[chief_index - distance] = distance
        if chief_index + distance < total:
            serials[chief_index + distance] = distance

    spouse = spouse_label(chief.name)
    if chief.spouse_position == SpousePosition.BEFORE:
        if chief_index > 0 and arrangement[chief_index - 1] == spouse:
            serials[chief_index - 1] = 0
    elif chief.spouse_position == SpousePosition.AFTER:
        if chief_index + 1 < total and arrangement[chief_index + 1] == spouse:
            serials[chief_index + 1] = 0

    LOGGER.debug("Chief %r at seat %d of %d", chief.name, chief_index, total)
    return SerialNumbers(serial_numbers=serials, chief_index=chief_index)


def display_serial(serial: int) -> str:
    """Unnumbered seats (the chief and spouse) show blank."""
    return "" if serial == 0 else str(serial)
