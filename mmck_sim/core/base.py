"""Base classes for the queueing system."""

from dataclasses import dataclass
from typing import Optional


class SimulationError(Exception):
    """Base class for everything raised by the simulator."""


class ConfigurationError(SimulationError, ValueError):
    """A component was constructed with degenerate or invalid parameters."""


class ClockError(SimulationError):
    """A clock was asked to move backwards in time."""


class SampleError(SimulationError):
    """A duration source produced a value the simulator cannot use."""


class TraceExhausted(SimulationError):
    """A trace-driven source has no more values to replay."""


@dataclass(frozen=True)
class CustomerRecord:
    """The complete trajectory of one simulated customer.

    Rejected customers carry only their arrival time; every other field is
    ``None`` so that a legitimate zero can never be mistaken for "not set".
    """
    arrival_time: float
    accepted: bool
    service_start_time: Optional[float] = None
    departure_time: Optional[float] = None
    seat_id: Optional[int] = None
    server_id: Optional[int] = None

    @classmethod
    def rejected_at(cls, arrival_time: float) -> 'CustomerRecord':
        return cls(arrival_time=arrival_time, accepted=False)

    @property
    def rejected(self) -> bool:
        return not self.accepted

    @property
    def waiting_time(self) -> Optional[float]:
        """Time spent in line before service began."""
        if not self.accepted:
            return None
        return self.service_start_time - self.arrival_time

    @property
    def service_time(self) -> Optional[float]:
        if not self.accepted:
            return None
        return self.departure_time - self.service_start_time

    @property
    def sojourn_time(self) -> Optional[float]:
        """Total time spent in the system (waiting plus service)."""
        if not self.accepted:
            return None
        return self.departure_time - self.arrival_time


class Clock:
    """An identity plus a monotonically non-decreasing time value.

    Arrivals, seats and servers all keep one of these as their state.
    """

    __slots__ = ('id', '_epoch')

    def __init__(self, clock_id: int = 0, epoch: float = 0.0):
        self.id = clock_id
        self._epoch = float(epoch)

    @property
    def epoch(self) -> float:
        return self._epoch

    def move_to(self, new_time: float) -> float:
        """Set the epoch forward to ``new_time``."""
        if new_time < self._epoch:
            raise ClockError(
                f"clock {self.id} cannot move back from {self._epoch:g} to {new_time:g}"
            )
        self._epoch = float(new_time)
        return self._epoch

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, epoch={self._epoch:g})"
