"""
===========================================================
sirvd.py
Last Updated: 2026-10-18
===========================================================

Description:
    Extended SIR model with vaccination, mortality and
    reinfection (SIRVD). Compartments:
        S - Susceptible
        I - Infected (infectious)
        R - Recovered (partially immune, can be reinfected)
        V - Vaccinated (partially immune, can be infected)
        D - Dead

    Equations:
        dS/dt = -S (r I + v)
        dI/dt =  I (r (S + i_v V + i_r R) - a - m)
        dR/dt =  a I - R (r i_r I + v)
        dV/dt =  v (S + R) - i_v r V I
        dD/dt =  m I

Notes:
    - i_r, i_v are *residual susceptibility* factors in [0, 1]:
      0 means full immunity, 1 means none. The notebook sliders
      give percent immunity; see SIRVDParams.from_percent_immunity.
    - Susceptible and recovered people are vaccinated at the
      same rate v.
    - Compartments are conserved: S + I + R + V + D is constant.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
from dataclasses import dataclass

COMPARTMENTS = ("S", "I", "R", "V", "D")


@dataclass(frozen=True)
class SIRVDParams:
    r: float      # transmission rate
    a: float      # recovery rate
    v: float      # vaccination rate
    m: float      # mortality of infected
    i_r: float    # recovered-immunity factor (residual susceptibility)
    i_v: float    # vaccinated-immunity factor (residual susceptibility)

    @classmethod
    def from_percent_immunity(
        cls,
        r: float,
        a: float,
        v: float,
        m: float,
        immunity_recovered: float,
        immunity_vaccinated: float,
    ) -> "SIRVDParams":
        """Build parameters from percent immunity (0-100) of R and V"""
        return cls(
            r=r, a=a, v=v, m=m,
            i_r=(100.0 - immunity_recovered) / 100.0,
            i_v=(100.0 - immunity_vaccinated) / 100.0,
        )


def sirvd(state, params: SIRVDParams, t: float) -> np.ndarray:
    S, I, R, V, D = state
    r, a, v, m = params.r, params.a, params.v, params.m
    i_r, i_v = params.i_r, params.i_v

    dS = -S * (r * I + v)
    dI = I * (r * (S + i_v * V + i_r * R) - a - m)
    dR = a * I - R * (r * i_r * I + v)
    dV = v * (S + R) - i_v * r * V * I
    dD = m * I
    return np.array([dS, dI, dR, dV, dD], dtype=float)


def sirvd_initial_state(I0: float, R0: float = 0.0, V0: float = 0.0, D0: float = 0.0) -> np.ndarray:
    """Initial fractions [S, I, R, V, D] with the remainder in S"""
    return np.array([1.0 - I0 - R0 - V0 - D0, I0, R0, V0, D0], dtype=float)
