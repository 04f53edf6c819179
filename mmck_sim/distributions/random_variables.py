"""
Random variable generators for queueing systems.
Every sampler draws from an explicit numpy Generator so runs are reproducible
from a seed; scipy.stats distributions are supported as well.
"""

import math
from typing import Callable, Iterable, List, Optional, Union

import numpy as np
from scipy import stats

from mmck_sim.core.base import ConfigurationError, TraceExhausted

Seed = Union[None, int, np.random.SeedSequence]


# Random sources
def make_rng(seed: Seed = None) -> np.random.Generator:
    """Create a Generator; ``None`` draws fresh entropy from the OS."""
    return np.random.default_rng(seed)


def spawn_rngs(seed: Seed, count: int) -> List[np.random.Generator]:
    """Create ``count`` statistically independent Generators from one seed."""
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in seed.spawn(count)]


def _check_positive(name: str, value: float) -> None:
    if not (math.isfinite(value) and value > 0):
        raise ConfigurationError(f"{name} must be positive and finite, got {value!r}")


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else make_rng()


# Distribution factory functions
def exponential_distribution(rate: float,
                             rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create an exponential distribution function with the given rate."""
    _check_positive('rate', rate)
    rng = _rng(rng)
    scale = 1.0 / rate
    return lambda: rng.exponential(scale)


def uniform_distribution(a: float, b: float,
                         rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create a uniform distribution function on [a, b)."""
    if b < a:
        raise ConfigurationError(f"uniform bounds out of order: {a!r} > {b!r}")
    rng = _rng(rng)
    return lambda: rng.uniform(a, b)


def gamma_distribution(shape: float, scale: float,
                       rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create a gamma distribution function."""
    _check_positive('shape', shape)
    _check_positive('scale', scale)
    rng = _rng(rng)
    return lambda: rng.gamma(shape, scale)


def erlang_distribution(k: int, rate: float,
                        rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Sum of ``k`` exponential phases, each with the given rate."""
    if k < 1:
        raise ConfigurationError(f"erlang needs at least one phase, got {k!r}")
    _check_positive('rate', rate)
    return gamma_distribution(k, 1.0 / rate, rng)


def lognormal_distribution(mean: float, std: float,
                           rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create a log-normal distribution function (parameters of the underlying normal)."""
    _check_positive('std', std)
    rng = _rng(rng)
    return lambda: rng.lognormal(mean, std)


def weibull_distribution(shape: float, scale: float,
                         rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create a Weibull distribution function."""
    _check_positive('shape', shape)
    _check_positive('scale', scale)
    rng = _rng(rng)
    return lambda: scale * rng.weibull(shape)


def deterministic_distribution(value: float) -> Callable[[], float]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value


def sequence_distribution(values: Iterable[float]) -> Callable[[], float]:
    """Replay the given values in order; raises TraceExhausted afterwards."""
    values = list(values)
    it = iter(values)

    def sample():
        try:
            return next(it)
        except StopIteration:
            raise TraceExhausted(f"sequence of {len(values)} samples exhausted") from None

    return sample


def empirical_distribution(data: List[float],
                           rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create an empirical distribution that resamples the observed data."""
    if len(data) == 0:
        raise ConfigurationError("empirical distribution needs at least one observation")
    data_array = np.asarray(data, dtype=float)
    rng = _rng(rng)
    return lambda: rng.choice(data_array)


# Advanced distributions using scipy
def scipy_distribution(dist_name: str,
                       rng: Optional[np.random.Generator] = None,
                       **params) -> Callable[[], float]:
    """
    Create a distribution function from scipy.stats.

    Examples:
        scipy_distribution('expon', scale=0.5)       # Exp(rate=2)
        scipy_distribution('gamma', a=2, scale=1/3)  # Gamma(2, 1/3)
        scipy_distribution('pareto', b=2.5)
    """
    try:
        dist = getattr(stats, dist_name)(**params)
    except (AttributeError, TypeError) as exc:
        raise ConfigurationError(f"unusable scipy distribution {dist_name!r}: {exc}") from exc
    rng = _rng(rng)
    return lambda: float(dist.rvs(random_state=rng))


# Composite distributions
def mixture_distribution(distributions: List[Callable[[], float]],
                         weights: Optional[List[float]] = None,
                         rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """
    Create a mixture distribution from multiple distributions.

    Args:
        distributions: List of distribution functions
        weights: Relative weights for each distribution (normalized here)
        rng: Generator used to pick the component
    """
    if not distributions:
        raise ConfigurationError("mixture needs at least one component")
    if weights is None:
        weights = [1 / len(distributions)] * len(distributions)

    weights = np.asarray(weights, dtype=float)
    if len(weights) != len(distributions) or np.any(weights < 0) or weights.sum() <= 0:
        raise ConfigurationError(f"invalid mixture weights {weights.tolist()}")
    weights = weights / weights.sum()
    rng = _rng(rng)

    def sample():
        dist_idx = rng.choice(len(distributions), p=weights)
        return distributions[dist_idx]()

    return sample
