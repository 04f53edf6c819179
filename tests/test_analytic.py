import math

import numpy as np
import pytest

from mmck_sim.core import ConfigurationError
from mmck_sim.system import (
    SimulationConfig,
    blocking_probability,
    blocking_standard_error,
    mean_sojourn_time,
    run_replications,
    run_simulation,
    state_probabilities,
)


def test_state_probabilities_sum_to_one():
    p = state_probabilities(3.0, 1.0, 4, 6)
    assert len(p) == 11
    assert p.sum() == pytest.approx(1.0)
    assert np.all(p >= 0)


def test_two_servers_at_unit_load():
    # a = 2, c = 2: weights 1, 2, 2, 2, 2, 2, 2, 2
    assert blocking_probability(2.0, 1.0, 2, 5) == pytest.approx(2 / 15)


def test_single_server_single_seat():
    a = 0.8
    assert blocking_probability(0.8, 1.0, 1, 1) == pytest.approx(a ** 2 / (1 + a + a ** 2))


def test_blocking_falls_as_line_grows():
    values = [blocking_probability(3.0, 1.0, 2, k) for k in range(1, 10)]
    assert all(b < a for a, b in zip(values, values[1:]))


def test_large_systems_stay_finite():
    p = blocking_probability(450.0, 1.0, 400, 300)
    assert 0.0 < p < 1.0
    assert math.isfinite(p)


def test_invalid_parameters():
    with pytest.raises(ConfigurationError):
        blocking_probability(0.0, 1.0, 1, 1)
    with pytest.raises(ConfigurationError):
        blocking_probability(math.inf, 1.0, 1, 1)
    with pytest.raises(ConfigurationError):
        state_probabilities(1.0, math.nan, 1, 1)
    with pytest.raises(ConfigurationError):
        blocking_probability(1.0, 1.0, 0, 1)


def test_standard_error():
    assert blocking_standard_error(0.5, 100) == pytest.approx(0.05)


def test_simulated_rejection_ratio_converges_to_blocking_probability():
    config = SimulationConfig(arrival_rate=2.0, service_rate=1.0, servers=2,
                              line_capacity=5, iterations=20000, replications=25,
                              seed=12345)
    result = run_replications(config)
    expected = blocking_probability(2.0, 1.0, 2, 5)
    assert result['analytic']['blocking_probability'] == pytest.approx(expected)
    # rejections arrive in bursts, so the error comes from the spread across
    # independent replications rather than from the binomial formula
    ratio = result['system']['rejection_ratio']
    standard_error = ratio['std'] / math.sqrt(config.replications - 1)
    assert standard_error > 0
    assert abs(ratio['mean'] - expected) <= 4 * standard_error


def test_simulated_sojourn_time_matches_littles_law():
    config = SimulationConfig(arrival_rate=3.0, service_rate=1.0, servers=4,
                              line_capacity=3, iterations=200000, seed=99)
    result = run_simulation(config)
    expected = mean_sojourn_time(3.0, 1.0, 4, 3)
    assert result['system']['average_sojourn_time'] == pytest.approx(expected, rel=0.03)
    assert result['system']['average_service_time'] == pytest.approx(1.0, rel=0.02)
