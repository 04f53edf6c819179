import dataclasses

import pytest

from mmck_sim.core import Clock, ClockError, ConfigurationError, CustomerRecord, SimulationError


def test_clock_moves_forward_only():
    clock = Clock(3)
    assert clock.id == 3
    assert clock.epoch == 0.0
    assert clock.move_to(2.5) == 2.5
    assert clock.move_to(2.5) == 2.5
    with pytest.raises(ClockError):
        clock.move_to(1.0)
    assert clock.epoch == 2.5


def test_rejected_record_has_no_trajectory():
    record = CustomerRecord.rejected_at(4.0)
    assert record.rejected
    assert not record.accepted
    assert record.arrival_time == 4.0
    assert record.service_start_time is None
    assert record.departure_time is None
    assert record.seat_id is None
    assert record.server_id is None
    assert record.waiting_time is None
    assert record.service_time is None
    assert record.sojourn_time is None


def test_zero_duration_customer_is_not_rejected():
    record = CustomerRecord(0.0, True, 0.0, 0.0, 0, 0)
    assert record.accepted
    assert record.waiting_time == 0.0
    assert record.sojourn_time == 0.0


def test_record_times():
    record = CustomerRecord(1.0, True, 2.5, 4.0, seat_id=1, server_id=0)
    assert record.waiting_time == 1.5
    assert record.service_time == 1.5
    assert record.sojourn_time == 3.0


def test_record_is_immutable():
    record = CustomerRecord(1.0, True, 1.0, 2.0, 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.departure_time = 5.0


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ConfigurationError, SimulationError)
