"""Closed-form results for the M/M/c/K model, used to check simulated estimates."""

import math

import numpy as np
from scipy.special import gammaln, logsumexp

from mmck_sim.core import ConfigurationError


def state_probabilities(arrival_rate: float,
                        service_rate: float,
                        servers: int,
                        line_capacity: int) -> np.ndarray:
    """
    Stationary distribution of the number of customers in the system.

    Element n is the long-run probability of n customers present, for
    n = 0 .. servers + line_capacity.
    """
    for rate in (arrival_rate, service_rate):
        if not (math.isfinite(rate) and rate > 0):
            raise ConfigurationError(f"rates must be positive and finite, got {rate!r}")
    if servers < 1 or line_capacity < 1:
        raise ConfigurationError("servers and line_capacity must be at least 1")

    a = arrival_rate / service_rate
    n = np.arange(servers + line_capacity + 1)
    # log of the unnormalized weights, split at n == servers
    log_w = np.where(
        n <= servers,
        n * math.log(a) - gammaln(n + 1),
        n * math.log(a) - gammaln(servers + 1) - (n - servers) * math.log(servers),
    )
    return np.exp(log_w - logsumexp(log_w))


def blocking_probability(arrival_rate: float,
                         service_rate: float,
                         servers: int,
                         line_capacity: int) -> float:
    """Probability that an arrival finds every server busy and every seat taken."""
    return float(state_probabilities(arrival_rate, service_rate, servers, line_capacity)[-1])


def mean_customers(arrival_rate: float,
                   service_rate: float,
                   servers: int,
                   line_capacity: int) -> float:
    """Long-run mean number of customers in the system."""
    p = state_probabilities(arrival_rate, service_rate, servers, line_capacity)
    return float(np.dot(np.arange(len(p)), p))


def mean_sojourn_time(arrival_rate: float,
                      service_rate: float,
                      servers: int,
                      line_capacity: int) -> float:
    """Mean time in system of admitted customers (Little's law on the admitted stream)."""
    p_block = blocking_probability(arrival_rate, service_rate, servers, line_capacity)
    admitted_rate = arrival_rate * (1.0 - p_block)
    return mean_customers(arrival_rate, service_rate, servers, line_capacity) / admitted_rate


def blocking_standard_error(p: float, n: int) -> float:
    """Standard error of a rejection ratio estimated from ``n`` arrivals."""
    return math.sqrt(p * (1.0 - p) / n)
