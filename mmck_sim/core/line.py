"""Waiting line implementation."""

import logging
from abc import ABC, abstractmethod
from typing import List, Tuple

from mmck_sim.core.base import Clock, ConfigurationError

log = logging.getLogger(__name__)


class WaitingLine(ABC):
    """Bounded line whose earliest available time gates admission."""

    @abstractmethod
    def earliest_available(self) -> float:
        pass

    @abstractmethod
    def wait_or_pass(self, arrival_time: float, server_ready_time: float) -> Tuple[float, int]:
        """
        Seat an admitted customer.
        Returns (scheduled_start_time, seat_id).
        """
        pass


class RingLine(WaitingLine):
    """Fixed number of seats reused in circular order.

    Each seat remembers the scheduled start time of its latest occupant. The
    seat at the cursor is the one the next admitted customer takes, so its
    value is the time from which the line has room again. That only holds
    while the service pool hands out non-decreasing ready times, which the
    min-heap pool guarantees.
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigurationError(f"line capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._seats: List[Clock] = [Clock(i) for i in range(capacity)]
        self.cursor = 0

    @property
    def seats(self) -> Tuple[float, ...]:
        """Snapshot of every seat's stored start time, in seat order."""
        return tuple(seat.epoch for seat in self._seats)

    def earliest_available(self) -> float:
        return self._seats[self.cursor].epoch

    def wait_or_pass(self, arrival_time: float, server_ready_time: float) -> Tuple[float, int]:
        seat = self._seats[self.cursor]
        # Wait until the server is ready, or pass straight through
        start = server_ready_time if arrival_time < server_ready_time else arrival_time
        seat.move_to(start)
        log.debug("seat %d: arrival %g starts at %g", seat.id, arrival_time, start)
        self.cursor = (self.cursor + 1) % self.capacity
        return start, seat.id
