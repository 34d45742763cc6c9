"""
Tests for trajectory summaries.
"""

import numpy as np
import pytest

from popmodels.growth import GrowthParams
from popmodels.simulate import simulate
from popmodels.summary import (
    basic_reproduction_number,
    epidemic_summary,
    icu_demand,
    infectious_period,
    new_infections,
    report_table,
    report_value,
)

POPSIZE = 9_044_650


def test_report_value_scales_and_rounds(sirvd_trajectory):
    # I(0) = 0.004 -> 36178.6 people
    assert report_value(sirvd_trajectory, 1, 0.0, POPSIZE) == 36179
    assert isinstance(report_value(sirvd_trajectory, 4, 100.0, POPSIZE), int)


def test_report_value_clamps_negative_noise():
    assert report_value(lambda t: np.array([-1e-12, 0.5]), 0, 0.0, POPSIZE) == 0
    assert report_value(lambda t: np.array([-1e-12, 0.5]), 1, 0.0, 3) == 2


def test_report_value_clamps_negative_trajectory():
    traj = simulate("constant", [0.0], GrowthParams(r=-0.01), (0.0, 10.0))
    assert traj(10.0)[0] < 0.0
    assert report_value(traj, 0, 10.0, 1000) == 0


def test_basic_reproduction_number():
    assert basic_reproduction_number(r=0.125, S0=0.99, a=0.1) == pytest.approx(1.2375)
    assert basic_reproduction_number(r=0.125, S0=0.99, a=0.0) == np.inf


def test_infectious_period():
    assert infectious_period(0.1) == pytest.approx(10.0)
    assert infectious_period(0.0) == np.inf


def test_report_table_rows_and_columns(sirvd_trajectory):
    table = report_table(sirvd_trajectory, [0.0, 100.0], POPSIZE, labels=["I", "R", "V", "D"])
    assert list(table.columns) == ["I", "R", "V", "D"]
    assert list(table.index) == [0.0, 100.0]
    assert table.loc[0.0, "D"] == round(0.001 * POPSIZE)
    assert (table.to_numpy() >= 0).all()
    # deaths only accumulate
    assert table.loc[100.0, "D"] > table.loc[0.0, "D"]


def test_epidemic_summary_peak(sir_trajectory):
    times = np.linspace(0.0, 200.0, 2001)
    out = epidemic_summary(sir_trajectory, times)
    I = sir_trajectory(times)[1]
    assert out["peak_infected"] == pytest.approx(I.max())
    assert 0.0 < out["peak_day"] < 200.0
    assert 0.0 < out["final_size"] < 1.0
    assert out["peak_prevalence"] == pytest.approx(out["peak_infected"])


def test_new_infections_change_sign_at_peak(sir_trajectory):
    times = np.linspace(0.0, 200.0, 2001)
    dI = new_infections(sir_trajectory, times)
    peak_day = epidemic_summary(sir_trajectory, times)["peak_day"]
    assert dI[0] > 0.0
    assert dI[-1] < 0.0
    crossing = times[np.argmax(dI < 0.0)]
    assert crossing == pytest.approx(peak_day, abs=0.2)


def test_icu_demand(sirvd_trajectory):
    times = np.linspace(0.0, 100.0, 11)
    df = icu_demand(sirvd_trajectory, times, POPSIZE)
    assert list(df.columns) == ["t", "icu", "capacity", "over_capacity"]
    assert df.loc[0, "icu"] == pytest.approx(0.004 * POPSIZE * 0.015)
    assert (df["capacity"] == 1000).all()
    assert not df.loc[0, "over_capacity"]
    assert (df["over_capacity"] == (df["icu"] > 1000)).all()
