"""Arrival process implementations."""

import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

import numpy as np

from mmck_sim.core.base import Clock, ConfigurationError, SampleError, TraceExhausted

log = logging.getLogger(__name__)


class ArrivalProcess(Clock, ABC):
    """Clock that produces strictly increasing arrival times on demand."""

    def __init__(self):
        super().__init__(0)

    @abstractmethod
    def advance(self) -> float:
        """Move to the next arrival and return its time."""
        pass


class RenewalArrival(ArrivalProcess):
    """Arrivals separated by i.i.d. intervals drawn from ``interarrival``."""

    def __init__(self, interarrival: Callable[[], float]):
        super().__init__()
        self.interarrival = interarrival

    def advance(self) -> float:
        interval = float(self.interarrival())
        if not interval > 0.0:
            raise SampleError(f"inter-arrival time must be positive, got {interval!r}")
        return self.move_to(self.epoch + interval)


class ExponentialArrival(RenewalArrival):
    """Poisson arrivals: exponential intervals with the given rate."""

    def __init__(self, rate: float, rng: Optional[np.random.Generator] = None):
        if not (math.isfinite(rate) and rate > 0):
            raise ConfigurationError(f"arrival rate must be positive and finite, got {rate!r}")
        self.rate = float(rate)
        self.rng = rng if rng is not None else np.random.default_rng()
        scale = 1.0 / self.rate
        super().__init__(lambda: self.rng.exponential(scale))


class TraceArrival(ArrivalProcess):
    """Replays a fixed sequence of absolute arrival times."""

    def __init__(self, times: Iterable[float]):
        super().__init__()
        self.times = [float(t) for t in times]
        previous = None
        for t in self.times:
            if t < 0.0 or (previous is not None and t <= previous):
                raise ConfigurationError(
                    f"trace arrival times must be non-negative and strictly increasing: {self.times}"
                )
            previous = t
        self._next = 0

    @property
    def remaining(self) -> int:
        return len(self.times) - self._next

    def advance(self) -> float:
        if self._next >= len(self.times):
            raise TraceExhausted(f"arrival trace exhausted after {len(self.times)} customers")
        t = self.times[self._next]
        self._next += 1
        log.debug("trace arrival %d at %g", self._next, t)
        return self.move_to(t)
