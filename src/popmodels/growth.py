"""
===========================================================
growth.py
Last Updated: 2026-10-18
===========================================================

Description:
    Single-population growth models used in the introductory
    notebook: constant, exponential and logistic growth.

    Defines:
        - constant_growth(), exponential_growth(), logistic_growth():
          ODE right-hand sides with signature (state, params, t).
        - *_solution(): the closed-form P(t) for each model, used
          to check simulated output against the analytic answer.
        - logistic_equilibria(): fixed points and their stability.

Notes:
    - Parameters are not range-checked here. A carrying capacity
      of zero gives inf/nan, not an exception.
    - r is the per-capita rate r_max in dP/dt = r*P*(1 - P/K).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class GrowthParams:
    r: float    # growth rate constant


@dataclass(frozen=True)
class LogisticParams:
    r: float    # maximum per-capita growth rate
    K: float    # carrying capacity


def constant_growth(state, params: GrowthParams, t: float) -> np.ndarray:
    """dP/dt = r"""
    return np.full(np.shape(state), params.r, dtype=float)


def exponential_growth(state, params: GrowthParams, t: float) -> np.ndarray:
    """dP/dt = r*P"""
    P = np.asarray(state, dtype=float)
    return params.r * P


def logistic_growth(state, params: LogisticParams, t: float) -> np.ndarray:
    """dP/dt = r*P*(1 - P/K)"""
    P = np.asarray(state, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return params.r * P * (1.0 - P / params.K)


def constant_solution(t, P0: float, params: GrowthParams):
    return P0 + params.r * np.asarray(t, dtype=float)


def exponential_solution(t, P0: float, params: GrowthParams):
    return P0 * np.exp(params.r * np.asarray(t, dtype=float))


def logistic_solution(t, P0: float, params: LogisticParams):
    """
    P(t) = K / ((K - P0)/P0 * exp(-r t) + 1)

    Undefined for P0 == 0 (the trivial solution P(t) = 0 is returned).
    """
    t = np.asarray(t, dtype=float)
    if P0 == 0:
        return np.zeros_like(t)
    K, r = params.K, params.r
    return K / ((K - P0) / P0 * np.exp(-r * t) + 1.0)


def logistic_equilibria(params: LogisticParams) -> Dict[str, float]:
    """
    Fixed points of the logistic model.

    For r > 0, P = 0 is unstable and P = K is stable; the growth
    rate is largest at P = K/2. The roles swap when r < 0.
    """
    stable, unstable = (params.K, 0.0) if params.r > 0 else (0.0, params.K)
    return {
        "stable": float(stable),
        "unstable": float(unstable),
        "max_growth_at": float(params.K / 2.0),
        "max_growth_rate": float(params.r * params.K / 4.0),
    }
