"""Core components of the queueing system."""

from .base import (
    Clock,
    CustomerRecord,
    SimulationError,
    ConfigurationError,
    ClockError,
    SampleError,
    TraceExhausted,
)
from .arrival import ArrivalProcess, RenewalArrival, ExponentialArrival, TraceArrival
from .line import WaitingLine, RingLine
from .service import Server, ServicePool, MinHeapService

__all__ = [
    'Clock',
    'CustomerRecord',
    'SimulationError',
    'ConfigurationError',
    'ClockError',
    'SampleError',
    'TraceExhausted',
    'ArrivalProcess',
    'RenewalArrival',
    'ExponentialArrival',
    'TraceArrival',
    'WaitingLine',
    'RingLine',
    'Server',
    'ServicePool',
    'MinHeapService',
]
