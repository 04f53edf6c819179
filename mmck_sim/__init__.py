"""Finite-capacity multi-server queue (M/M/c/K) simulation package."""

from mmck_sim.core import (
    CustomerRecord,
    ArrivalProcess,
    ExponentialArrival,
    RenewalArrival,
    TraceArrival,
    WaitingLine,
    RingLine,
    Server,
    ServicePool,
    MinHeapService,
    SimulationError,
    ConfigurationError,
)
from mmck_sim.system import Simulation, SimulationConfig, build_simulation

__version__ = '0.1.0'

__all__ = [
    'CustomerRecord',
    'ArrivalProcess',
    'ExponentialArrival',
    'RenewalArrival',
    'TraceArrival',
    'WaitingLine',
    'RingLine',
    'Server',
    'ServicePool',
    'MinHeapService',
    'SimulationError',
    'ConfigurationError',
    'Simulation',
    'SimulationConfig',
    'build_simulation',
]
