"""Simulation engine, configuration and run statistics."""

from .simulation import Simulation
from .config import SimulationConfig, build_simulation
from .metrics import RunMetrics, run_simulation, run_replications
from .analytic import (
    state_probabilities,
    blocking_probability,
    mean_customers,
    mean_sojourn_time,
    blocking_standard_error,
)

__all__ = [
    'Simulation',
    'SimulationConfig',
    'build_simulation',
    'RunMetrics',
    'run_simulation',
    'run_replications',
    'state_probabilities',
    'blocking_probability',
    'mean_customers',
    'mean_sojourn_time',
    'blocking_standard_error',
]
