"""Rejection ratio versus line capacity, simulated and analytic."""

import argparse
from typing import Dict, List

import numpy as np

from mmck_sim.system import SimulationConfig, blocking_probability, run_simulation
from mmck_sim.visualization.plotting import plot_blocking_comparison


def sweep_capacities(capacities: List[int],
                     arrival_rate: float = 2.0,
                     service_rate: float = 1.0,
                     servers: int = 2,
                     iterations: int = 200000,
                     seed: int = 42) -> Dict[str, List[float]]:
    """Simulate each line capacity with its own spawned seed."""
    children = np.random.SeedSequence(seed).spawn(len(capacities))
    simulated, errors, analytic = [], [], []
    for k, child in zip(capacities, children):
        config = SimulationConfig(
            arrival_rate=arrival_rate,
            service_rate=service_rate,
            servers=servers,
            line_capacity=k,
            iterations=iterations,
        )
        result = run_simulation(config, child)
        simulated.append(result['system']['rejection_ratio'])
        errors.append(result['analytic']['standard_error'])
        analytic.append(blocking_probability(arrival_rate, service_rate, servers, k))
    return {'capacities': list(capacities), 'simulated': simulated,
            'errors': errors, 'analytic': analytic}


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--max-capacity', type=int, default=8)
    parser.add_argument('-n', '--iterations', type=int, default=200000)
    parser.add_argument('-s', '--seed', type=int, default=42)
    parser.add_argument('--plot-file', type=str)
    args = parser.parse_args()

    sweep = sweep_capacities(list(range(1, args.max_capacity + 1)),
                             iterations=args.iterations, seed=args.seed)
    print(f"{'K':>3} {'simulated':>12} {'analytic':>12}")
    for k, sim, exact in zip(sweep['capacities'], sweep['simulated'], sweep['analytic']):
        print(f"{k:>3} {sim:>12.6f} {exact:>12.6f}")

    if args.plot_file:
        fig = plot_blocking_comparison(sweep['capacities'], sweep['simulated'],
                                       sweep['analytic'], sweep['errors'])
        fig.savefig(args.plot_file, dpi=150, bbox_inches='tight')


if __name__ == '__main__':
    main()
