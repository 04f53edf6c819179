"""
Visualization utilities for queueing simulations.
"""

from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from mmck_sim.core import CustomerRecord


def plot_sojourn_distribution(records: Sequence[CustomerRecord],
                              title: str = "Time in System"):
    """Histograms of waiting and sojourn times of admitted customers."""
    accepted = [r for r in records if r.accepted]
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle(title)

    if not accepted:
        for ax in (ax1, ax2):
            ax.text(0.5, 0.5, 'No admitted customers',
                    ha='center', va='center', transform=ax.transAxes)
        return fig

    waits = np.array([r.waiting_time for r in accepted])
    sojourns = np.array([r.sojourn_time for r in accepted])

    sns.histplot(waits, bins=50, stat='density', ax=ax1, color='tab:orange')
    ax1.axvline(waits.mean(), color='k', linestyle='--',
                label=f'mean {waits.mean():.3f}')
    ax1.set_xlabel('Waiting time')
    ax1.set_title(f'Waiting ({np.mean(waits > 0):.1%} waited)')
    ax1.legend()

    sns.histplot(sojourns, bins=50, stat='density', ax=ax2, color='tab:blue')
    ax2.axvline(sojourns.mean(), color='k', linestyle='--',
                label=f'mean {sojourns.mean():.3f}')
    ax2.set_xlabel('Sojourn time')
    ax2.set_title('Sojourn')
    ax2.legend()

    plt.tight_layout()
    return fig


def plot_customer_timeline(records: Sequence[CustomerRecord],
                           limit: Optional[int] = 50):
    """Gantt-like chart: one row per server, waiting and service as bars."""
    records = list(records)[:limit] if limit else list(records)
    accepted = [r for r in records if r.accepted]
    server_ids = sorted({r.server_id for r in accepted})
    row = {sid: i for i, sid in enumerate(server_ids)}

    fig, ax = plt.subplots(figsize=(12, 1 + 0.6 * max(len(server_ids), 1)))
    for r in accepted:
        y = row[r.server_id]
        if r.waiting_time > 0:
            ax.barh(y, r.waiting_time, left=r.arrival_time, height=0.3,
                    color='lightgray', edgecolor='gray')
        ax.barh(y, r.service_time, left=r.service_start_time, height=0.5,
                color='tab:blue', alpha=0.7)

    rejected = [r.arrival_time for r in records if r.rejected]
    if rejected:
        ax.plot(rejected, [-0.8] * len(rejected), 'rx', label='Rejected')
        ax.legend(loc='upper right')

    ax.set_yticks(range(len(server_ids)))
    ax.set_yticklabels([f'server {sid}' for sid in server_ids])
    ax.set_xlabel('Time')
    ax.set_title(f'First {len(records)} Customers')
    return fig


def plot_blocking_comparison(capacities: List[int],
                             simulated: List[float],
                             analytic: List[float],
                             errors: Optional[List[float]] = None,
                             title: str = "Blocking Probability"):
    """Compare simulated rejection ratios with the analytic blocking probability."""
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(capacities, analytic, 'r-', linewidth=2, label='Analytic')
    ax.errorbar(capacities, simulated, yerr=errors, fmt='o', capsize=3,
                label='Simulated')
    ax.set_xlabel('Line capacity K')
    ax.set_ylabel('Rejection ratio')
    ax.set_yscale('log')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    return fig


def plot_run_summary(summary: Dict, title: str = "M/M/c/K Simulation"):
    """Bar dashboard of a single-run summary produced by run_simulation."""
    system = summary['system']
    fig, (ax1, ax2, ax3) = plt.subplots(1, 3, figsize=(15, 5))
    fig.suptitle(title, fontsize=16)

    ax1.bar(['Departed', 'Rejected'],
            [system['total_departed'], system['total_rejected']])
    ax1.set_ylabel('Number of Customers')
    ax1.set_title('Customer Flow')

    ax2.bar(['Waiting', 'Service', 'Sojourn'],
            [system['average_waiting_time'],
             system['average_service_time'],
             system['average_sojourn_time']])
    ax2.set_ylabel('Average Time')
    ax2.set_title('Time Averages')

    servers = summary.get('servers', {})
    ax3.bar(list(servers.keys()), list(servers.values()))
    ax3.set_xlabel('Server')
    ax3.set_ylabel('Customers Served')
    ax3.set_title('Server Load')

    plt.tight_layout()
    return fig
