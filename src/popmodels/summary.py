"""
===========================================================
summary.py
Last Updated: 2026-10-18
===========================================================

Description:
    Scalar and tabular summaries of a trajectory for display:
    absolute counts at given times, R0 and infectious period,
    epidemic peak/final size, new infections and ICU demand.

Notes:
    - Nothing here mutates the trajectory.
    - Counts are clamped at zero and rounded half-to-even, so
      solver undershoot never shows up as a negative count.
    - R0 and the infectious period come from the parameters and
      the initial state, not from the trajectory.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
import pandas as pd
from typing import Dict, Optional, Sequence

ICU_FRACTION = 0.015    # share of infected needing intensive care
ICU_CAPACITY = 1000     # available ICU beds


def report_value(trajectory, compartment_index: int, t: float, population_size: float) -> int:
    """
    Absolute count in one compartment at time t.

    Parameters:
    trajectory: callable t -> state vector (e.g. a Trajectory)
    compartment_index: int. Position of the compartment in the state
    t: float. Time inside the simulated interval
    population_size: float. Scales fractions to people

    Returns:
    count: int, never negative
    """
    value = float(trajectory(t)[compartment_index]) * population_size
    return int(round(max(0.0, value)))


def basic_reproduction_number(r: float, S0: float, a: float) -> float:
    """R0 = r * S0 / a"""
    return r * S0 / a if a else np.inf


def infectious_period(a: float) -> float:
    """Mean infectious period 1/a"""
    return 1.0 / a if a else np.inf


def report_table(
    trajectory,
    times: Sequence[float],
    population_size: float,
    labels: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Counts per compartment at the requested times, one row per time.

    Parameters:
    trajectory: Trajectory
    times: iterable of times (e.g. [0, t_max])
    population_size: float
    labels: compartment labels to report; all compartments if None
    """
    compartments = list(trajectory.compartments)
    labels = list(labels) if labels is not None else compartments
    rows = []
    for t in times:
        row = {"t": float(t)}
        for label in labels:
            row[label] = report_value(trajectory, compartments.index(label), t, population_size)
        rows.append(row)
    return pd.DataFrame(rows).set_index("t")


def epidemic_summary(
    trajectory,
    times: Sequence[float],
    infected_index: int = 1,
    removed_index: int = 2,
) -> Dict[str, float]:
    """Peak day, peak prevalence and final size sampled on a time grid"""
    times = np.asarray(times, dtype=float)
    Y = trajectory(times)
    I, R = Y[infected_index], Y[removed_index]
    N0 = float(np.sum(Y[:, 0]))
    peak_idx = int(np.argmax(I))
    return {
        "peak_day": float(times[peak_idx]),
        "peak_infected": float(I[peak_idx]),
        "peak_prevalence": float(I[peak_idx] / N0),
        "final_size": float(R[-1] / N0),
    }


def new_infections(trajectory, times: Sequence[float], infected_index: int = 1) -> np.ndarray:
    """dI/dt on a time grid (net change of the infected compartment)"""
    return trajectory.derivative(np.asarray(times, dtype=float), index=infected_index)


def icu_demand(
    trajectory,
    times: Sequence[float],
    population_size: float,
    infected_index: int = 1,
    icu_fraction: float = ICU_FRACTION,
    icu_capacity: float = ICU_CAPACITY,
) -> pd.DataFrame:
    """
    Intensive-care demand implied by the infected curve.

    Returns a DataFrame with columns t, icu, capacity, over_capacity.
    """
    times = np.asarray(times, dtype=float)
    infected = np.maximum(trajectory(times)[infected_index], 0.0) * population_size
    icu = infected * icu_fraction
    return pd.DataFrame({
        "t": times,
        "icu": icu,
        "capacity": np.full_like(times, float(icu_capacity)),
        "over_capacity": icu > icu_capacity,
    })
