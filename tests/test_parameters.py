"""
Tests for notebook parameter sets and slider ranges.
"""

import dataclasses

import numpy as np
import pytest

from popmodels.models import ModelKind
from popmodels.parameters import (
    SLIDERS,
    GrowthScenario,
    LogisticScenario,
    ParameterRange,
    PredatorPreyScenario,
    SIRScenario,
    SIRVDScenario,
    create_constant_growth_scenario,
    create_no_vaccination_scenario,
    create_waning_immunity_scenario,
)


def test_parameter_range_values_stop_at_max():
    K = SLIDERS["logistic"]["K"]
    values = K.values()
    assert values[0] == 1 and values[-1] == 76
    assert len(values) == 16


def test_parameter_range_clip():
    rng = ParameterRange(0.0, 0.25, 0.001, 0.1)
    assert rng.clip(1.0) == 0.25
    assert rng.clip(-1.0) == 0.0
    assert rng.clip(0.1) == 0.1


def test_slider_defaults_match_scenarios():
    sirvd = SIRVDScenario()
    for name, rng in SLIDERS["sirvd"].items():
        assert getattr(sirvd, name) == pytest.approx(rng.default), name
    pp = PredatorPreyScenario()
    for name, rng in SLIDERS["lotka_volterra"].items():
        assert getattr(pp, name) == pytest.approx(rng.default), name


def test_sirvd_scenario_builds_params_and_state():
    sc = SIRVDScenario()
    p = sc.params()
    assert p.i_r == pytest.approx(0.4)
    assert p.i_v == pytest.approx(0.1)
    assert sc.initial_state().sum() == pytest.approx(1.0)


def test_scenarios_are_replaced_not_mutated():
    sc = SIRScenario()
    with pytest.raises(dataclasses.FrozenInstanceError):
        sc.r = 0.5
    faster = dataclasses.replace(sc, r=0.5)
    assert sc.r == 0.125 and faster.r == 0.5


@pytest.mark.parametrize("scenario", [
    GrowthScenario(),
    create_constant_growth_scenario(),
    LogisticScenario(),
    PredatorPreyScenario(),
    SIRScenario(),
    SIRVDScenario(),
])
def test_every_scenario_runs(scenario):
    traj = scenario.simulation().run()
    t_max = scenario.t_max
    assert np.all(np.isfinite(traj(np.linspace(0.0, t_max, 11))))
    assert scenario.to_dict()["t_max"] == t_max


def test_alternative_scenarios():
    assert create_constant_growth_scenario().simulation().model.kind == ModelKind.CONSTANT
    no_vax = create_no_vaccination_scenario()
    assert no_vax.v == 0.0 and no_vax.V0 == 0.0
    assert create_waning_immunity_scenario().params().i_r == pytest.approx(0.8)


def test_print_summary(capsys):
    SIRVDScenario().print_summary()
    PredatorPreyScenario().print_summary()
    out = capsys.readouterr().out
    assert "SIRVD MODEL PARAMETERS" in out
    assert "N* = 20.0" in out
