"""
===========================================================
simulate.py
Last Updated: 2026-10-18
===========================================================

Description:
    Runs a model over a closed time interval with SciPy's
    adaptive-step integrator (solve_ivp, dense output) and wraps
    the result in a read-only Trajectory that can be queried at
    any time in the interval.

API:
    simulate(model, y0, params, t_span, method="RK45", rtol=1e-6, atol=1e-8)
        -> Trajectory
    Simulation(model, y0, params, t_span).run()  -> Trajectory
    Trajectory(t)                      -> state at t (or states at each t)
    Trajectory.derivative(t, index)    -> rate of change at t
    Trajectory.sample(times) / to_frame(times)

Notes:
    - A run is fully determined by (model, y0, params, t_span); the
      same inputs give the same trajectory.
    - A failed integration raises IntegrationError. There is no
      retry and no fallback to another method.
    - Implausible inputs (negative compartments or rates) only
      trigger a PlausibilityWarning; they are integrated as given.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import warnings
import numpy as np
import pandas as pd
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union
from scipy.integrate import solve_ivp

from .models import Model, ModelKind, get_model

# models whose parameters may legitimately be negative (decay)
_SIGNED_PARAM_MODELS = (ModelKind.CONSTANT, ModelKind.EXPONENTIAL, ModelKind.LOGISTIC)


class IntegrationError(RuntimeError):
    """The ODE solver could not produce a trajectory"""


class PlausibilityWarning(UserWarning):
    """Inputs are mathematically valid but biologically meaningless"""


class Trajectory:
    """
    Dense solution of one simulation run.

    Parameters:
    model: Model. The model that was integrated
    params: parameter value used for the run
    t_span: (t0, t1). Closed interval covered by the solution
    solution: OdeResult from solve_ivp with dense_output=True
    """

    def __init__(self, model: Model, params: Any, t_span: Tuple[float, float], solution):
        self.model = model
        self.params = params
        self.t_span = (float(t_span[0]), float(t_span[1]))
        self._interp = solution.sol

        # accepted solver steps
        self.t = np.array(solution.t, dtype=float)
        self.y = np.array(solution.y, dtype=float)
        self.t.flags.writeable = False
        self.y.flags.writeable = False

        lo, hi = min(self.t_span), max(self.t_span)
        self._bounds = (lo, hi)
        self._eps = 1e-9 * max(1.0, hi - lo)

    @property
    def compartments(self) -> Tuple[str, ...]:
        return self.model.compartments

    def _check_times(self, t: np.ndarray):
        lo, hi = self._bounds
        if np.any(t < lo - self._eps) or np.any(t > hi + self._eps):
            raise ValueError(f"Requested time outside the simulated interval [{lo}, {hi}]")

    def __call__(self, t: Union[float, Sequence[float]]) -> np.ndarray:
        """State at time t; for an array of times, shape (n_compartments, len(t))"""
        t = np.asarray(t, dtype=float)
        self._check_times(t)
        return self._interp(np.clip(t, *self._bounds))

    def derivative(self, t: Union[float, Sequence[float]], index: Optional[int] = None) -> np.ndarray:
        """
        Rate of change of the state at time t.

        The model is evaluated at the interpolated state, so this is
        the model's own derivative rather than a finite difference.

        Parameters:
        t: float or array of times inside the interval
        index: int, optional. Compartment to return; all if None
        """
        t_arr = np.asarray(t, dtype=float)
        states = self(t_arr)
        if t_arr.ndim == 0:
            rates = self.model.derivative(states, self.params, float(t_arr))
        else:
            rates = np.column_stack([
                self.model.derivative(states[:, k], self.params, float(tk))
                for k, tk in enumerate(t_arr)
            ]) if t_arr.size else np.empty((self.model.n_compartments, 0))
        return rates if index is None else rates[index]

    def sample(self, times: Sequence[float]) -> Dict[str, np.ndarray]:
        """Sample the trajectory on a time grid -> dict(t, <compartment>...)"""
        times = np.asarray(times, dtype=float)
        Y = self(times)
        out = {"t": times}
        for label, row in zip(self.compartments, Y):
            out[label] = row
        return out

    def to_frame(self, times: Sequence[float]) -> pd.DataFrame:
        """Tidy DataFrame with a 't' column and one column per compartment"""
        return pd.DataFrame(self.sample(times))

    def __repr__(self) -> str:
        return (f"Trajectory(model={self.model.kind.value!r}, t_span={self.t_span}, "
                f"steps={len(self.t)})")


def _check_plausibility(model: Model, y0: np.ndarray, params: Any):
    if np.any(y0 < 0):
        warnings.warn(
            f"Negative initial state {y0.tolist()} for {model.kind.value} model",
            PlausibilityWarning,
            stacklevel=3,
        )
    if model.kind == ModelKind.LOGISTIC and params.K <= 0:
        warnings.warn(f"Carrying capacity K={params.K} is not positive", PlausibilityWarning, stacklevel=3)
    if model.kind not in _SIGNED_PARAM_MODELS and is_dataclass(params):
        negative = {f.name: getattr(params, f.name) for f in fields(params) if getattr(params, f.name) < 0}
        if negative:
            warnings.warn(
                f"Negative rate parameters {negative} for {model.kind.value} model",
                PlausibilityWarning,
                stacklevel=3,
            )


def simulate(
    model: Union[Model, ModelKind, str],
    y0: Sequence[float],
    params: Any,
    t_span: Tuple[float, float],
    method: str = "RK45",
    rtol: float = 1e-6,
    atol: float = 1e-8,
    max_step: float = np.inf,
) -> Trajectory:
    """
    Integrate a model over [t0, t1] and return its dense trajectory.

    Parameters:
    model: Model, ModelKind or kind name ("sir", "logistic", ...)
    y0: array-like. Initial state, one value per compartment
    params: parameter dataclass for the model (e.g. SIRParams)
    t_span: tuple. (t0, t1) integration interval
    method: str, default='RK45'. Any solve_ivp method (RK45, RK23, DOP853, Radau, BDF, LSODA)
    rtol, atol: float. Solver tolerances
    max_step: float. Upper bound on the solver step size

    Returns:
    Trajectory
    """
    model = get_model(model)
    y0 = np.asarray(y0, dtype=float).ravel()
    if y0.shape != (model.n_compartments,):
        raise ValueError(
            f"{model.kind.value} model expects {model.n_compartments} initial values "
            f"{model.compartments}, got {y0.size}"
        )
    if not isinstance(params, model.params_type):
        raise TypeError(
            f"{model.kind.value} model expects {model.params_type.__name__}, got {type(params).__name__}"
        )
    t0, t1 = float(t_span[0]), float(t_span[1])
    if t0 == t1:
        raise ValueError("t_span must cover a non-empty interval")

    _check_plausibility(model, y0, params)

    solution = solve_ivp(
        fun=lambda t, y: model.derivative(y, params, t),
        t_span=(t0, t1),
        y0=y0,
        method=method,
        dense_output=True,
        rtol=rtol,
        atol=atol,
        max_step=max_step,
    )

    if not solution.success:
        raise IntegrationError(f"ODE solver failed for {model.kind.value} model: {solution.message}")
    if not np.all(np.isfinite(solution.y)):
        raise IntegrationError(f"ODE solver produced non-finite values for {model.kind.value} model")

    return Trajectory(model, params, (t0, t1), solution)


@dataclass(frozen=True)
class Simulation:
    """
    One simulation run: model, initial state, parameters and time span.

    Immutable; a parameter change means a new Simulation
    (dataclasses.replace), never an edited one.
    """
    model: Model
    y0: Tuple[float, ...]
    params: Any
    t_span: Tuple[float, float]

    def __post_init__(self):
        object.__setattr__(self, "model", get_model(self.model))
        object.__setattr__(self, "y0", tuple(float(v) for v in np.asarray(self.y0, dtype=float).ravel()))
        object.__setattr__(self, "t_span", (float(self.t_span[0]), float(self.t_span[1])))

    def run(self, **solver_options) -> Trajectory:
        return simulate(self.model, self.y0, self.params, self.t_span, **solver_options)
