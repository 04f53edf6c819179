"""Visualization utilities for queueing simulations."""

from .plotting import (
    plot_sojourn_distribution,
    plot_customer_timeline,
    plot_blocking_comparison,
    plot_run_summary,
)

__all__ = [
    'plot_sojourn_distribution',
    'plot_customer_timeline',
    'plot_blocking_comparison',
    'plot_run_summary',
]
