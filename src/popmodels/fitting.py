"""
===========================================================
fitting.py
Last Updated: 2026-10-18
===========================================================

Description:
    Calibrate the growth rate r of a single-population growth
    model to an observed series by gradient descent (Adam) on
    the squared-error loss

        L(r) = sum_k (P(t_k; r) - y_k)^2

    Used to fit exponential growth to the vaccinated fraction of
    a country's population.

Example Usage:
    from popmodels.fitting import fit_growth_rate
    result = fit_growth_rate(t, y_obs, y0=0.00055, r0=0.05)

Notes:
    - P(t; r) comes from the simulator, not the closed form, so
      either single-rate growth model (constant, exponential) can
      be fitted.
    - Adam works on the dimensionless growth theta = r * (t_end - t_start)
      rather than on r. Its steps are roughly learning_rate in size,
      and a step of 0.1 in r would swamp a daily rate of a few
      percent.
    - The gradient is a central finite difference; the simulator
      runs with tight tolerances to keep it smooth.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .growth import GrowthParams
from .models import ModelKind, get_model
from .simulate import simulate

# callback(r, loss, y_hat) -> True to stop
FitCallback = Callable[[float, float, np.ndarray], Optional[bool]]

# models whose only parameter is the rate r
FITTABLE_KINDS = (ModelKind.CONSTANT, ModelKind.EXPONENTIAL)


@dataclass
class GrowthFitResult:
    r: float
    loss: float
    iterations: int
    loss_history: np.ndarray
    t: np.ndarray
    y_fit: np.ndarray


def _predict(kind, r: float, y0: float, t: np.ndarray) -> np.ndarray:
    traj = simulate(kind, [y0], GrowthParams(r=r), (t[0], t[-1]), rtol=1e-10, atol=1e-12)
    return traj(t)[0]


def _sse(y_obs: np.ndarray, y_hat: np.ndarray) -> float:
    return float(np.sum((y_hat - y_obs) ** 2))


def fit_growth_rate(
    t,
    y_obs,
    y0: Optional[float] = None,
    r0: float = 0.05,
    kind: Union[ModelKind, str] = ModelKind.EXPONENTIAL,
    learning_rate: float = 0.1,
    max_iter: int = 100,
    betas: tuple = (0.9, 0.999),
    eps: float = 1e-8,
    fd_step: float = 1e-4,
    callback: Optional[FitCallback] = None,
) -> GrowthFitResult:
    """
    Fit r by Adam on the squared-error loss.

    Args:
        t, y_obs: time grid (increasing) and observations (same length).
        y0: initial population; defaults to the first observation.
        r0: starting value for r.
        kind: growth model to fit, constant or exponential.
        learning_rate, betas, eps: Adam hyperparameters, applied to the
            scaled rate r * (t[-1] - t[0]).
        fd_step: relative step of the central-difference gradient.
        callback: called as callback(r, loss, y_hat) every iteration;
            returning True stops the descent.

    Returns:
        GrowthFitResult with the best r seen, its loss, the loss history
        and the fitted series.
    """
    t = np.asarray(t, dtype=float)
    y_obs = np.asarray(y_obs, dtype=float)
    if t.shape != y_obs.shape:
        raise ValueError("t and y_obs must have equal lengths")
    if t.size < 2:
        raise ValueError("need at least two observations to fit")
    kind = get_model(kind).kind
    if kind not in FITTABLE_KINDS:
        raise ValueError(
            f"Cannot fit a growth rate for the {kind.value} model; "
            f"expected one of {[k.value for k in FITTABLE_KINDS]}"
        )
    if y0 is None:
        y0 = float(y_obs[0])
    span = float(t[-1] - t[0])
    if span <= 0:
        raise ValueError("t must be increasing")

    def loss(r: float):
        y_hat = _predict(kind, r, y0, t)
        return _sse(y_obs, y_hat), y_hat

    b1, b2 = betas
    m = v = 0.0
    theta = float(r0) * span
    best = {"r": float(r0), "loss": np.inf}
    history = []
    iterations = 0

    for k in range(1, max_iter + 1):
        iterations = k
        r = theta / span
        val, y_hat = loss(r)
        history.append(val)
        if val < best["loss"]:
            best = {"r": r, "loss": val}
        if callback is not None and callback(r, val, y_hat):
            break

        h = fd_step * max(1.0, abs(theta))
        grad = (loss((theta + h) / span)[0] - loss((theta - h) / span)[0]) / (2.0 * h)

        # Adam update
        m = b1 * m + (1.0 - b1) * grad
        v = b2 * v + (1.0 - b2) * grad ** 2
        m_hat = m / (1.0 - b1 ** k)
        v_hat = v / (1.0 - b2 ** k)
        theta = theta - learning_rate * m_hat / (np.sqrt(v_hat) + eps)

    # final parameter may beat every evaluated one
    r = theta / span
    val, _ = loss(r)
    if val < best["loss"]:
        best = {"r": r, "loss": val}

    return GrowthFitResult(
        r=float(best["r"]),
        loss=float(best["loss"]),
        iterations=iterations,
        loss_history=np.asarray(history),
        t=t,
        y_fit=_predict(kind, best["r"], y0, t),
    )


def fit_from_dataframe(df: pd.DataFrame, time_col: str = "t", value_col: str = "vaccinated", **kwargs):
    """Fit to a DataFrame column, e.g. the output of dataio.owid.vaccinated_fraction"""
    t = df[time_col].to_numpy(dtype=float)
    y = df[value_col].to_numpy(dtype=float)
    return fit_growth_rate(t, y, **kwargs)
