import pytest

from booking_api.core.status import (
    ALLOWED_TRANSITIONS,
    BookingStatus,
    can_transition,
    is_terminal,
)


@pytest.mark.parametrize(
    "current,target",
    [
        (BookingStatus.PENDING, BookingStatus.CONFIRMED),
        (BookingStatus.PENDING, BookingStatus.CANCELLED),
        (BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS),
        (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
        (BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize(
    "current,target",
    [
        (BookingStatus.COMPLETED, BookingStatus.PENDING),
        (BookingStatus.PENDING, BookingStatus.COMPLETED),
        (BookingStatus.PENDING, BookingStatus.PENDING),
        (BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED),
        (BookingStatus.CANCELLED, BookingStatus.CONFIRMED),
    ],
)
def test_rejected_transitions(current, target):
    assert not can_transition(current, target)


def test_terminal_states():
    assert is_terminal(BookingStatus.COMPLETED)
    assert is_terminal(BookingStatus.CANCELLED)
    assert not is_terminal(BookingStatus.PENDING)


def test_every_status_has_a_row():
    assert set(ALLOWED_TRANSITIONS) == set(BookingStatus)
