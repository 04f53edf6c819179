import math

import numpy as np
import pytest

from mmck_sim.core import (
    ConfigurationError,
    ExponentialArrival,
    RenewalArrival,
    SampleError,
    TraceArrival,
    TraceExhausted,
)
from mmck_sim.distributions import deterministic_distribution


def test_exponential_arrivals_strictly_increase():
    arrival = ExponentialArrival(3.0, np.random.default_rng(1))
    times = [arrival.advance() for _ in range(2000)]
    assert all(b > a for a, b in zip(times, times[1:]))
    assert times[0] > 0.0
    assert arrival.epoch == times[-1]


def test_exponential_arrival_rate():
    arrival = ExponentialArrival(4.0, np.random.default_rng(2))
    n = 50000
    for _ in range(n):
        last = arrival.advance()
    assert n / last == pytest.approx(4.0, rel=0.03)


def test_exponential_arrival_is_reproducible():
    a = ExponentialArrival(1.0, np.random.default_rng(5))
    b = ExponentialArrival(1.0, np.random.default_rng(5))
    assert [a.advance() for _ in range(10)] == [b.advance() for _ in range(10)]


@pytest.mark.parametrize('rate', [0, -1.0, math.inf, math.nan])
def test_exponential_arrival_rejects_bad_rate(rate):
    with pytest.raises(ConfigurationError):
        ExponentialArrival(rate)


def test_renewal_arrival_with_fixed_interval():
    arrival = RenewalArrival(deterministic_distribution(0.5))
    assert [arrival.advance() for _ in range(3)] == [0.5, 1.0, 1.5]


@pytest.mark.parametrize('interval', [0.0, -0.1])
def test_renewal_arrival_rejects_non_positive_interval(interval):
    arrival = RenewalArrival(deterministic_distribution(interval))
    with pytest.raises(SampleError):
        arrival.advance()
    assert arrival.epoch == 0.0


def test_trace_arrival_replays_and_exhausts():
    arrival = TraceArrival([0.0, 1.0, 1.5])
    assert arrival.remaining == 3
    assert [arrival.advance() for _ in range(3)] == [0.0, 1.0, 1.5]
    assert arrival.remaining == 0
    with pytest.raises(TraceExhausted):
        arrival.advance()


@pytest.mark.parametrize('times', [[1.0, 1.0], [2.0, 1.0], [-1.0, 2.0]])
def test_trace_arrival_requires_increasing_times(times):
    with pytest.raises(ConfigurationError):
        TraceArrival(times)
