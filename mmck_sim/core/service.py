"""Service pool implementation."""

import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from mmck_sim.core.base import Clock, ConfigurationError, SampleError

log = logging.getLogger(__name__)


class Server(Clock):
    """A server whose epoch is the time it next becomes free."""

    def __init__(self, server_id: int, duration: Callable[[], float]):
        super().__init__(server_id)
        self.duration = duration
        self.served = 0

    def advance(self) -> float:
        """Add one service duration and return the resulting departure time."""
        d = float(self.duration())
        if d < 0.0:
            raise SampleError(f"server {self.id} drew a negative service time {d!r}")
        self.served += 1
        return self.move_to(self.epoch + d)


class ServicePool(ABC):
    """Group of servers that hands each customer the soonest free one."""

    @abstractmethod
    def earliest_available(self) -> float:
        pass

    @abstractmethod
    def serve(self, start_time: float) -> Tuple[float, int]:
        """
        Serve a customer dispatched at start_time.
        Returns (departure_time, server_id).
        """
        pass


class MinHeapService(ServicePool):
    """Servers kept in an array-backed binary min-heap keyed by epoch."""

    def __init__(self, servers: Sequence[Server]):
        if not servers:
            raise ConfigurationError("a service pool needs at least one server")
        ids = [s.id for s in servers]
        if len(set(ids)) != len(ids):
            raise ConfigurationError(f"server ids must be unique, got {ids}")
        self._heap: List[Server] = list(servers)
        for i in range(len(self._heap) // 2 - 1, -1, -1):
            self._sift_down(i)
        log.debug("built service pool of %d servers", len(self._heap))

    @classmethod
    def exponential(cls,
                    count: int,
                    rate: float,
                    rng: Optional[np.random.Generator] = None) -> 'MinHeapService':
        """Pool of ``count`` servers with exponential service at ``rate``.

        Each server gets its own generator spawned from ``rng``.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ConfigurationError(f"server count must be a positive integer, got {count!r}")
        if not (math.isfinite(rate) and rate > 0):
            raise ConfigurationError(f"service rate must be positive and finite, got {rate!r}")
        if rng is None:
            rng = np.random.default_rng()
        scale = 1.0 / rate
        servers = []
        for i, child in enumerate(rng.spawn(count)):
            servers.append(Server(i, lambda g=child: g.exponential(scale)))
        return cls(servers)

    @property
    def size(self) -> int:
        return len(self._heap)

    @property
    def servers(self) -> List[Tuple[int, float]]:
        """(id, epoch) for every server, in heap order."""
        return [(s.id, s.epoch) for s in self._heap]

    def served_counts(self):
        return {s.id: s.served for s in self._heap}

    def earliest_available(self) -> float:
        return self._heap[0].epoch

    def serve(self, start_time: float) -> Tuple[float, int]:
        root = self._heap[0]
        root.move_to(start_time)
        departure = root.advance()
        self._sift_down(0)
        return departure, root.id

    def _min_of_three(self, i: int) -> int:
        """Index of the smallest epoch among node i and its children."""
        heap = self._heap
        smallest = i
        left = 2 * i + 1
        right = left + 1
        if left < len(heap) and heap[left].epoch < heap[smallest].epoch:
            smallest = left
        if right < len(heap) and heap[right].epoch < heap[smallest].epoch:
            smallest = right
        return smallest

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        child = self._min_of_three(i)
        while child != i:
            heap[i], heap[child] = heap[child], heap[i]
            i = child
            child = self._min_of_three(i)
