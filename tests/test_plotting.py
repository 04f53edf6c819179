import matplotlib.pyplot as plt
import pytest

from mmck_sim.core import CustomerRecord
from mmck_sim.examples.capacity_sweep import sweep_capacities
from mmck_sim.system import SimulationConfig, run_simulation
from mmck_sim.visualization import (
    plot_blocking_comparison,
    plot_customer_timeline,
    plot_run_summary,
    plot_sojourn_distribution,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_sojourn_distribution(scenario_b):
    fig = plot_sojourn_distribution(list(scenario_b.run(3)))
    assert len(fig.axes) == 2


def test_sojourn_distribution_without_admissions():
    fig = plot_sojourn_distribution([CustomerRecord.rejected_at(1.0)])
    assert len(fig.axes) == 2


def test_customer_timeline(scenario_a):
    fig = plot_customer_timeline(list(scenario_a.run(3)))
    fig.canvas.draw()
    ax = fig.axes[0]
    assert [t.get_text() for t in ax.get_yticklabels()] == ['server 0']
    assert ax.get_legend() is not None


def test_run_summary():
    result = run_simulation(SimulationConfig(iterations=500, seed=1))
    fig = plot_run_summary(result)
    assert len(fig.axes) == 3


def test_blocking_comparison_from_sweep():
    sweep = sweep_capacities([1, 2, 3], iterations=3000, seed=5)
    assert sweep['capacities'] == [1, 2, 3]
    assert len(sweep['simulated']) == 3
    assert sweep['analytic'][0] > sweep['analytic'][-1]
    fig = plot_blocking_comparison(sweep['capacities'], sweep['simulated'],
                                   sweep['analytic'], sweep['errors'])
    assert fig.axes[0].get_yscale() == 'log'
