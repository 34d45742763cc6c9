"""
Tests for the growth-rate calibration.
"""

import numpy as np
import pandas as pd
import pytest

from popmodels.fitting import fit_from_dataframe, fit_growth_rate


@pytest.fixture
def synthetic_vaccinations():
    t = np.arange(0.0, 89.0)
    y = 0.00055 * np.exp(0.03 * t)
    return t, y


def test_fit_converges_with_default_settings(synthetic_vaccinations):
    """Validates: default Adam settings fit a daily rate of a few percent"""
    t, y = synthetic_vaccinations
    iterates = []

    def callback(r, loss, y_hat):
        iterates.append(r)

    result = fit_growth_rate(t, y, y0=0.00055, callback=callback)
    assert result.r == pytest.approx(0.03, abs=1e-3)
    assert result.loss < result.loss_history[0]
    assert result.y_fit.shape == y.shape
    assert result.iterations == 100
    # iterates never leave the plausible range
    assert min(iterates) > 0.0


@pytest.mark.parametrize("r0", [0.01, 0.035])
def test_fit_from_other_starting_rates(synthetic_vaccinations, r0):
    t, y = synthetic_vaccinations
    result = fit_growth_rate(t, y, y0=0.00055, r0=r0)
    assert result.r == pytest.approx(0.03, abs=1e-3)


def test_fit_constant_growth():
    t = np.arange(0.0, 51.0)
    y = 0.1 + 0.002 * t
    result = fit_growth_rate(t, y, kind="constant")
    assert result.r == pytest.approx(0.002, abs=2e-4)


def test_callback_can_stop_early(synthetic_vaccinations):
    t, y = synthetic_vaccinations
    seen = []

    def callback(r, loss, y_hat):
        seen.append((r, loss, y_hat.shape))
        return True

    result = fit_growth_rate(t, y, r0=0.05, callback=callback)
    assert result.iterations == 1
    assert len(result.loss_history) == 1
    assert seen[0][0] == pytest.approx(0.05)
    assert seen[0][2] == y.shape


def test_fit_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fit_growth_rate([0.0, 1.0, 2.0], [1.0, 2.0])


@pytest.mark.parametrize("kind", ["logistic", "sir", "lotka_volterra"])
def test_fit_rejects_models_with_more_than_a_rate(synthetic_vaccinations, kind):
    t, y = synthetic_vaccinations
    with pytest.raises(ValueError, match="Cannot fit"):
        fit_growth_rate(t, y, kind=kind)


def test_fit_from_dataframe_uses_first_observation(synthetic_vaccinations):
    t, y = synthetic_vaccinations
    df = pd.DataFrame({"t": t, "vaccinated": y})
    result = fit_from_dataframe(df, r0=0.03, max_iter=3, learning_rate=1e-4)
    assert result.y_fit[0] == pytest.approx(y[0])
    assert result.r == pytest.approx(0.03, abs=1e-3)
