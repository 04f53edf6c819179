import matplotlib

matplotlib.use('Agg')

import pytest

from mmck_sim.core import MinHeapService, RingLine, Server, TraceArrival
from mmck_sim.distributions import sequence_distribution
from mmck_sim.system import Simulation


@pytest.fixture
def make_deterministic():
    """Build a simulation from explicit arrival times and per-server durations."""
    def build(arrivals, capacity, durations):
        servers = [Server(i, sequence_distribution(d)) for i, d in enumerate(durations)]
        return Simulation(TraceArrival(arrivals), RingLine(capacity), MinHeapService(servers))
    return build


@pytest.fixture
def scenario_a(make_deterministic):
    return make_deterministic([0.0, 1.0, 1.5], 1, [[2.0, 1.0]])


@pytest.fixture
def scenario_b(make_deterministic):
    return make_deterministic([0.0, 0.5, 3.0], 2, [[1.0, 1.0, 1.0]])
