#!/usr/bin/env python3
"""Command-line interface for running M/M/c/K simulations."""

import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional

from mmck_sim.core import ConfigurationError
from mmck_sim.system import SimulationConfig, run_replications, run_simulation
from mmck_sim.visualization.plotting import plot_run_summary, plot_sojourn_distribution

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mmck-sim',
        description='Simulate a finite-capacity multi-server queue')

    parser.add_argument('--config', type=str,
                        help='JSON configuration file; command-line options override it')
    parser.add_argument('-n', '--iterations', type=int,
                        help='Number of arriving customers per run (default: 100000)')
    parser.add_argument('-r', '--replications', type=int,
                        help='Number of independent replications (default: 1)')
    parser.add_argument('-s', '--seed', type=int,
                        help='Root random seed (default: fresh entropy)')

    parser.add_argument('--arrival-rate', type=float,
                        help='Poisson arrival rate (default: 2.0)')
    parser.add_argument('--service-rate', type=float,
                        help='Exponential service rate per server (default: 1.0)')
    parser.add_argument('-c', '--servers', type=int,
                        help='Number of servers (default: 2)')
    parser.add_argument('-k', '--capacity', type=int, dest='line_capacity',
                        help='Number of waiting seats (default: 5)')

    parser.add_argument('-o', '--output', type=str,
                        help='Output file for results (JSON)')
    parser.add_argument('--plot-file', type=str,
                        help='Save plots to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                        help='Show detailed statistics')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log verbosity (-v info, -vv debug)')
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge the optional config file with command-line overrides."""
    data = {}
    if args.config:
        data = SimulationConfig.from_json(args.config).to_dict()
    for key in ('arrival_rate', 'service_rate', 'servers', 'line_capacity',
                'iterations', 'seed', 'replications'):
        value = getattr(args, key)
        if value is not None:
            data[key] = value
    return SimulationConfig.from_dict(data)


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def print_results(results: Dict, detailed: bool = False) -> None:
    """Print results to console."""
    config = results['config']
    print("\n=== Simulation Results ===")
    print(f"Model: M/M/{config['servers']}/{config['servers'] + config['line_capacity']}"
          f"  (arrival rate {config['arrival_rate']}, service rate {config['service_rate']})")
    print(f"Customers per run: {config['iterations']}")

    analytic = results['analytic']['blocking_probability']
    if 'replications' in results:
        print(f"Replications: {results['replications']}")
        print("\nSystem Metrics:")
        for metric, stats in results['system'].items():
            print(f"  {metric}: {stats['mean']:.6f} (±{stats['std']:.6f})")
            if detailed:
                print(f"    Min: {stats['min']:.6f}, Max: {stats['max']:.6f}")
        ratio = results['system']['rejection_ratio']['mean']
    else:
        print("\nSystem Metrics:")
        for metric, value in results['system'].items():
            print(f"  {metric}: {value:.6f}")
        if detailed:
            print("\nCustomers served per server:")
            for server_id, count in results['servers'].items():
                print(f"  {server_id}: {count}")
        ratio = results['system']['rejection_ratio']

    print(f"\nratio: {ratio:.6f} ± {results['analytic']['standard_error']:.6f}"
          f"  (analytic blocking probability {analytic:.6f})")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        config = load_config(args)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    plot_records = bool(args.plot_file)
    if config.replications > 1:
        results = run_replications(config)
    else:
        results = run_simulation(config, keep_records=plot_records)
    records = results.pop('records', None)

    if not args.quiet:
        print_results(results, args.detailed)

    if args.output:
        save_results(results, args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    if args.plot_file:
        if records is None:
            # Replication summaries carry no records; rerun once for the plot
            log.info("running additional simulation for plotting")
            single = run_simulation(config, keep_records=True)
            records = single.pop('records')
        else:
            single = results
        fig = plot_run_summary(single)
        fig.savefig(args.plot_file, dpi=150, bbox_inches='tight')
        sojourn_file = _suffixed(args.plot_file, '_sojourn')
        plot_sojourn_distribution(records).savefig(sojourn_file, dpi=150, bbox_inches='tight')
        if not args.quiet:
            print(f"Plots saved to: {args.plot_file}, {sojourn_file}")

    return 0


def _suffixed(path: str, suffix: str) -> str:
    stem, ext = os.path.splitext(path)
    return stem + suffix + ext


if __name__ == '__main__':
    sys.exit(main())
