"""Statistics over simulated customers, for single runs and replications."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import numpy as np

from mmck_sim.core import CustomerRecord
from mmck_sim.system.analytic import blocking_probability, blocking_standard_error
from mmck_sim.system.config import SimulationConfig, build_simulation

log = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    """Tracks per-run metrics as customer records are pushed in."""
    total_arrivals: int = 0
    total_rejected: int = 0
    total_departed: int = 0
    total_waiting_time: float = 0.0
    total_service_time: float = 0.0
    total_sojourn_time: float = 0.0
    waited: int = 0  # accepted customers that did not pass straight through
    last_arrival_time: float = 0.0
    last_departure_time: float = 0.0
    served_by: Counter = field(default_factory=Counter)

    def record(self, customer: CustomerRecord) -> None:
        self.total_arrivals += 1
        self.last_arrival_time = customer.arrival_time
        if customer.rejected:
            self.total_rejected += 1
            return
        self.total_departed += 1
        wait = customer.waiting_time
        self.total_waiting_time += wait
        if wait > 0:
            self.waited += 1
        self.total_service_time += customer.service_time
        self.total_sojourn_time += customer.sojourn_time
        self.last_departure_time = max(self.last_departure_time, customer.departure_time)
        self.served_by[customer.server_id] += 1

    def record_all(self, customers: Iterable[CustomerRecord]) -> 'RunMetrics':
        for customer in customers:
            self.record(customer)
        return self

    def rejection_ratio(self) -> float:
        if self.total_arrivals > 0:
            return self.total_rejected / self.total_arrivals
        return 0.0

    def _per_departure(self, total: float) -> float:
        if self.total_departed > 0:
            return total / self.total_departed
        return 0.0

    def average_waiting_time(self) -> float:
        return self._per_departure(self.total_waiting_time)

    def average_service_time(self) -> float:
        return self._per_departure(self.total_service_time)

    def average_sojourn_time(self) -> float:
        return self._per_departure(self.total_sojourn_time)

    def wait_probability(self) -> float:
        """Fraction of admitted customers that had to wait for a server."""
        return self._per_departure(self.waited)

    def throughput(self) -> float:
        if self.last_departure_time > 0:
            return self.total_departed / self.last_departure_time
        return 0.0

    def summary(self) -> Dict[str, float]:
        return {
            'total_arrivals': self.total_arrivals,
            'total_rejected': self.total_rejected,
            'total_departed': self.total_departed,
            'rejection_ratio': self.rejection_ratio(),
            'average_waiting_time': self.average_waiting_time(),
            'average_service_time': self.average_service_time(),
            'average_sojourn_time': self.average_sojourn_time(),
            'wait_probability': self.wait_probability(),
            'throughput': self.throughput(),
        }


def run_simulation(config: SimulationConfig,
                   seed: Optional[np.random.SeedSequence] = None,
                   keep_records: bool = False) -> Dict:
    """Run a single replication and return its metrics summary."""
    simulation = build_simulation(config, seed)
    metrics = RunMetrics()
    records: List[CustomerRecord] = []
    for customer in simulation.run(config.iterations):
        metrics.record(customer)
        if keep_records:
            records.append(customer)

    result = {
        'config': config.to_dict(),
        'system': metrics.summary(),
        'servers': {str(k): v for k, v in sorted(metrics.served_by.items())},
        'analytic': {
            'blocking_probability': blocking_probability(
                config.arrival_rate, config.service_rate, config.servers, config.line_capacity),
            'standard_error': blocking_standard_error(metrics.rejection_ratio(),
                                                      max(metrics.total_arrivals, 1)),
        },
    }
    if keep_records:
        result['records'] = records
    log.info("run finished: %d arrivals, rejection ratio %.6f",
             metrics.total_arrivals, metrics.rejection_ratio())
    return result


def run_replications(config: SimulationConfig) -> Dict:
    """Run independent replications and compute statistics across them."""
    children = np.random.SeedSequence(config.seed).spawn(config.replications)
    results = [run_simulation(config, child) for child in children]

    summary = {
        'config': config.to_dict(),
        'replications': config.replications,
        'system': {},
        'analytic': dict(results[0]['analytic']),
    }
    for key in results[0]['system']:
        values = np.array([r['system'][key] for r in results], dtype=float)
        summary['system'][key] = {
            'mean': float(np.mean(values)),
            'std': float(np.std(values)),
            'min': float(np.min(values)),
            'max': float(np.max(values)),
        }

    ratio = summary['system']['rejection_ratio']['mean']
    total = config.iterations * config.replications
    summary['analytic']['standard_error'] = blocking_standard_error(ratio, total)
    return summary
