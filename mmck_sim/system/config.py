"""Run configuration and builders for the default M/M/c/K model."""

import json
import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

import numpy as np

from mmck_sim.core import ConfigurationError, ExponentialArrival, MinHeapService, RingLine
from mmck_sim.system.simulation import Simulation

log = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass
class SimulationConfig:
    """Parameters of one M/M/c/K experiment.

    The defaults are two servers at rate 1 behind a five-seat line, fed by
    Poisson arrivals at rate 2.
    """
    arrival_rate: float = 2.0
    service_rate: float = 1.0
    servers: int = 2
    line_capacity: int = 5
    iterations: int = 100000
    seed: Optional[int] = None
    replications: int = 1

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for name in ('arrival_rate', 'service_rate'):
            value = getattr(self, name)
            if (isinstance(value, bool) or not isinstance(value, (int, float))
                    or not (math.isfinite(value) and value > 0)):
                raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")
        for name in ('servers', 'line_capacity', 'iterations', 'replications'):
            value = getattr(self, name)
            if not _is_int(value) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if self.seed is not None and (not _is_int(self.seed) or self.seed < 0):
            raise ConfigurationError(f"seed must be a non-negative integer, got {self.seed!r}")

    @property
    def system_capacity(self) -> int:
        """Most customers that can be present at once (in service plus waiting)."""
        return self.servers + self.line_capacity

    @property
    def offered_load(self) -> float:
        return self.arrival_rate / self.service_rate

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str) -> 'SimulationConfig':
        with open(path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"{path}: invalid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_simulation(config: SimulationConfig,
                     seed: Optional[np.random.SeedSequence] = None) -> Simulation:
    """Build the default exponential arrival, ring line and min-heap pool.

    The arrival process and the pool get independent random streams spawned
    from ``seed`` (or from ``config.seed`` when no seed is given).
    """
    if seed is None:
        seed = np.random.SeedSequence(config.seed)
    arrival_seed, service_seed = seed.spawn(2)
    log.info("building M/M/%d/%d simulation: arrival_rate=%g service_rate=%g",
             config.servers, config.system_capacity, config.arrival_rate, config.service_rate)
    return Simulation(
        ExponentialArrival(config.arrival_rate, np.random.default_rng(arrival_seed)),
        RingLine(config.line_capacity),
        MinHeapService.exponential(config.servers, config.service_rate,
                                   np.random.default_rng(service_seed)),
    )
