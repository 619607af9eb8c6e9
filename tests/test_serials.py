from protocol_seating.arrangement import build_arrangement
from protocol_seating.models import BeforeAfter, Guest, GuestRole, SpousePosition
from protocol_seating.serials import compute_serial_numbers, display_serial


def _chief(name="A", spouse=SpousePosition.NONE):
    return Guest(id="chief", name=name, role=GuestRole.CHIEF_GUEST, spouse_position=spouse)


def _regular(name, grad):
    return Guest(id=name, name=name, role=GuestRole.REGULAR, gradation_no=grad)


def test_three_seat_row():
    guests = [_chief(), _regular("B", 1), _regular("C", 2)]
    arrangement = build_arrangement(guests).arrangement
    result = compute_serial_numbers(guests, arrangement)
    assert result.chief_index == 1
    assert result.serial_numbers == [1, 0, 1]


def test_lopsided_row_keeps_counting():
    guests = [_chief()]
    result = compute_serial_numbers(guests, ["A", "x", "y", "z"])
    assert result.chief_index == 0
    assert result.serial_numbers == [0, 1, 2, 3]


def test_spouse_before_chief_is_unnumbered():
    guests = [_chief(spouse=SpousePosition.BEFORE), _regular("B", 1)]
    arrangement = build_arrangement(guests).arrangement
    assert arrangement == ["B", "Spouse of A", "A"]
    result = compute_serial_numbers(guests, arrangement)
    assert result.chief_index == 2
    assert result.serial_numbers == [2, 0, 0]


def test_spouse_after_chief_is_unnumbered():
    guests = [_chief(spouse=SpousePosition.AFTER), _regular("B", 1), _regular("C", 2)]
    arrangement = build_arrangement(guests).arrangement
    assert arrangement == ["B", "A", "Spouse of A", "C"]
    assert compute_serial_numbers(guests, arrangement).serial_numbers == [1, 0, 0, 2]


def test_separated_spouse_keeps_its_number():
    guests = [
        _chief(spouse=SpousePosition.AFTER),
        Guest(id="x", name="X", role=GuestRole.CUSTOM, reference_id="chief", before_after=BeforeAfter.AFTER),
    ]
    arrangement = build_arrangement(guests).arrangement
    assert arrangement == ["A", "X", "Spouse of A"]
    assert compute_serial_numbers(guests, arrangement).serial_numbers == [0, 1, 2]


def test_no_chief():
    result = compute_serial_numbers([_regular("B", 1)], ["B"])
    assert result.serial_numbers == []
    assert result.chief_index is None


def test_chief_missing_from_row():
    result = compute_serial_numbers([_chief("A")], ["B", "C"])
    assert result.serial_numbers == []
    assert result.chief_index is None


def test_symmetric_numbering():
    guests = [_chief(spouse=SpousePosition.BEFORE)] + [_regular(f"R{n}", n) for n in range(1, 8)]
    guests.append(Guest(id="k", name="K", role=GuestRole.CUSTOM, gradation_no=1))
    arrangement = build_arrangement(guests).arrangement
    result = compute_serial_numbers(guests, arrangement)
    c = result.chief_index
    serials = result.serial_numbers

    assert len(serials) == len(arrangement)
    assert serials[c] == 0
    assert serials[c - 1] == 0  # spouse
    for d in range(2, len(arrangement)):
        if c - d >= 0 and c + d < len(arrangement):
            assert serials[c - d] == serials[c + d] == d
    assert [i for i, s in enumerate(serials) if s == 0] == [c - 1, c]


def test_display_serial():
    assert display_serial(0) == ""
    assert display_serial(3) == "3"
