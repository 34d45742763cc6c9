"""
===========================================================
predator_prey.py
Last Updated: 2026-10-18
===========================================================

Description:
    Lotka-Volterra predator-prey model:

        dN/dt = N (a - b P)
        dP/dt = P (c N - d)

    N is the prey population, P the predator population.

Notes:
    - The predator equation uses c*N (prey availability), the
      standard form. A c*P variant circulates in older copies of
      the notebook and is a typo.
    - Coexistence equilibrium at (N*, P*) = (d/c, a/b).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LotkaVolterraParams:
    a: float    # prey growth constant
    b: float    # prey death constant (predation)
    c: float    # predator growth constant
    d: float    # predator death constant

    def equilibrium(self) -> Tuple[float, float]:
        """Non-trivial fixed point (d/c, a/b); inf where a rate is zero"""
        N_star = self.d / self.c if self.c else np.inf
        P_star = self.a / self.b if self.b else np.inf
        return float(N_star), float(P_star)


def lotka_volterra(state, params: LotkaVolterraParams, t: float) -> np.ndarray:
    N, P = state
    dN = N * (params.a - params.b * P)
    dP = P * (params.c * N - params.d)
    return np.array([dN, dP], dtype=float)


def conserved_quantity(N, P, params: LotkaVolterraParams):
    """
    First integral of the system, V = c N - d ln N + b P - a ln P.

    Constant along every trajectory with N, P > 0, so each orbit in
    the phase plane is a closed level curve of V.
    """
    N = np.asarray(N, dtype=float)
    P = np.asarray(P, dtype=float)
    return params.c * N - params.d * np.log(N) + params.b * P - params.a * np.log(P)
