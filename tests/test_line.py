import pytest

from mmck_sim.core import ConfigurationError, RingLine


@pytest.mark.parametrize('capacity', [0, -2, 2.5, True, None])
def test_invalid_capacity(capacity):
    with pytest.raises(ConfigurationError):
        RingLine(capacity)


def test_empty_line_is_available_from_zero():
    line = RingLine(3)
    assert line.capacity == 3
    assert line.earliest_available() == 0.0
    assert line.seats == (0.0, 0.0, 0.0)


def test_pass_through_when_server_is_free():
    line = RingLine(2)
    assert line.wait_or_pass(3.0, 1.0) == (3.0, 0)
    assert line.seats == (3.0, 0.0)


def test_wait_until_server_is_ready():
    line = RingLine(2)
    assert line.wait_or_pass(1.0, 4.0) == (4.0, 0)


def test_cursor_visits_every_seat_before_repeating():
    line = RingLine(3)
    seats = []
    for i in range(7):
        start, seat_id = line.wait_or_pass(float(i), float(i))
        seats.append(seat_id)
    assert seats == [0, 1, 2, 0, 1, 2, 0]
    assert line.cursor == 1


def test_earliest_available_is_the_seat_at_the_cursor():
    line = RingLine(2)
    line.wait_or_pass(0.0, 5.0)
    # cursor now on the untouched second seat
    assert line.earliest_available() == 0.0
    line.wait_or_pass(1.0, 6.0)
    assert line.earliest_available() == 5.0
    line.wait_or_pass(5.0, 7.0)
    assert line.earliest_available() == 6.0
    assert line.seats == (7.0, 6.0)
