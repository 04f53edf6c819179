"""Random variable distributions for queueing systems."""

from .random_variables import (
    make_rng,
    spawn_rngs,
    exponential_distribution,
    uniform_distribution,
    gamma_distribution,
    erlang_distribution,
    lognormal_distribution,
    weibull_distribution,
    deterministic_distribution,
    sequence_distribution,
    empirical_distribution,
    scipy_distribution,
    mixture_distribution,
)

__all__ = [
    'make_rng',
    'spawn_rngs',
    'exponential_distribution',
    'uniform_distribution',
    'gamma_distribution',
    'erlang_distribution',
    'lognormal_distribution',
    'weibull_distribution',
    'deterministic_distribution',
    'sequence_distribution',
    'empirical_distribution',
    'scipy_distribution',
    'mixture_distribution',
]
