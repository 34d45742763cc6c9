"""
===========================================================
sir.py
Last Updated: 2026-10-18
===========================================================

Description:
    Deterministic SIR (Susceptible–Infectious–Recovered) model
    on population fractions, mass-action transmission:

        dS/dt = -r S I
        dI/dt =  r S I - a I
        dR/dt =  a I

    Defines:
        - SIRParams: transmission rate r, recovery rate a.
        - sir(): the ODE right-hand side (state, params, t).
        - sir_initial_state(): [1 - I0 - R0, I0, R0].

Example Usage:
    from popmodels.sir import SIRParams, sir_initial_state
    from popmodels.simulate import simulate
    traj = simulate("sir", sir_initial_state(0.01), SIRParams(0.125, 0.1), (0, 100))

Notes:
    - Each outflow is another compartment's inflow, so S + I + R
      stays at its initial value.
    - Closed population: no births, deaths or migration.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
from dataclasses import dataclass

COMPARTMENTS = ("S", "I", "R")


@dataclass(frozen=True)
class SIRParams:
    r: float    # transmission rate
    a: float    # recovery rate [1/a = infectious period]


def sir(state, params: SIRParams, t: float) -> np.ndarray:
    """Right-hand side of the SIR equations"""
    S, I, R = state
    inf = params.r * S * I
    rec = params.a * I
    return np.array([-inf, inf - rec, rec], dtype=float)


def sir_initial_state(I0: float, R0: float = 0.0) -> np.ndarray:
    """Initial fractions with the remainder in S"""
    return np.array([1.0 - I0 - R0, I0, R0], dtype=float)
