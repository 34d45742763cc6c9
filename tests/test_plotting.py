"""
Smoke tests for the figure helpers (Agg backend, nothing shown).
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from popmodels import plotting
from popmodels.growth import LogisticParams
from popmodels.parameters import LogisticScenario


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_rate_logistic():
    ax = plotting.plot_rate("logistic", LogisticParams(0.1, 30.0), carrying_capacity=30.0,
                            reference_rate=0.1, show=False)
    assert ax.get_title() == "Rateplot"
    assert len(ax.lines) >= 3


def test_plot_growth_panel():
    sc = LogisticScenario()
    traj = sc.simulation().run()
    fig = plotting.plot_growth_panel("logistic", sc.params(), traj, np.linspace(0, sc.t_max, 101),
                                     carrying_capacity=sc.K, show=False)
    assert len(fig.axes) == 2


def test_plot_timecourse_and_phase(lv_trajectory, grid):
    ax = plotting.plot_timecourse(lv_trajectory, grid, show=False)
    assert len(ax.lines) == 2
    ax = plotting.plot_phase(lv_trajectory, grid, "N", "P",
                             equilibrium=lv_trajectory.params.equilibrium(), show=False)
    assert ax.get_xlabel() == "N(t)"


def test_plot_stacked_area_with_icu(sirvd_trajectory, grid):
    ax = plotting.plot_stacked_area(sirvd_trajectory, grid, population_size=9_044_650,
                                    icu_fraction=0.015, show=False)
    assert ax.get_title() == "Timecourse (stacked area)"
    assert len(ax.collections) >= 6


def test_plot_new_infections(sir_trajectory, grid):
    ax = plotting.plot_new_infections(sir_trajectory, grid, show=False)
    assert len(ax.lines[0].get_xdata()) == len(grid)


def test_plot_owid():
    df = pd.DataFrame({
        "date": pd.date_range("2021-01-01", periods=4).tolist() * 2,
        "location": ["Austria"] * 4 + ["Germany"] * 4,
        "total_cases": np.arange(8.0),
    })
    ax = plotting.plot_owid(df, ["total_cases"], show=False)
    assert len(ax.lines) == 2
