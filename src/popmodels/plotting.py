"""
===========================================================
plotting.py
Last Updated: 2026-10-18
===========================================================
Visualization functions for the population and epidemic models.

Rate plots (dP/dt vs P), time courses, phase portraits, stacked
area time courses with an optional ICU layer, new infections,
and the Our World in Data explorer plot.

All functions take an optional `ax` and a `show` flag and
return the Axes (or Figure) they drew on.
"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Dict, Optional, Sequence, Tuple
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .models import rate_curve
from .summary import ICU_CAPACITY

# notebook colour scheme per compartment
COLORS: Dict[str, str] = {
    "S": "gainsboro",
    "I": "lightcoral",
    "R": "paleturquoise",
    "V": "skyblue",
    "D": "dimgray",
    "N": "tab:blue",
    "P": "tab:red",
}


def _finish(ax: Axes, show: bool) -> Axes:
    if show:
        plt.tight_layout()
        plt.show()
    return ax


def plot_rate(kind,
              params,
              population: Optional[np.ndarray] = None,
              carrying_capacity: Optional[float] = None,
              reference_rate: Optional[float] = None,
              ax: Optional[Axes] = None,
              show: bool = True) -> Axes:
    """
    Rate plot: growth rate dP/dt against population size P.

    Parameters
    ----------
    kind : Model, ModelKind or str
        Single-population model
    params : GrowthParams or LogisticParams
    population : np.ndarray, optional
        P values; defaults to 0..100 in steps of 0.5
    carrying_capacity : float, optional
        Draws the P = K line
    reference_rate : float, optional
        Draws dP/dt = r*P for comparison with unlimited growth
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4.5))
    if population is None:
        population = np.arange(0.0, 100.5, 0.5)

    ax.plot(population, rate_curve(kind, params, population), linewidth=2)
    if carrying_capacity is not None:
        ax.axvline(carrying_capacity, color="darkgrey", linestyle="--", label="P = K")
    if reference_rate is not None:
        ax.plot(population, reference_rate * population, color="grey", linestyle=":",
                label=r"$\frac{dP}{dt} = rP$")
        ax.legend()
    ax.axhline(0.0, color="black", linewidth=0.5)
    ax.set_xlabel("P")
    ax.set_ylabel(r"$\frac{dP}{dt}$")
    ax.set_title("Rateplot")
    return _finish(ax, show)


def plot_timecourse(trajectory,
                    times: Sequence[float],
                    labels: Optional[Sequence[str]] = None,
                    ylim: Optional[Tuple[float, float]] = None,
                    ax: Optional[Axes] = None,
                    show: bool = True,
                    title: str = "Timecourse") -> Axes:
    """Line plot of each compartment over time"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    data = trajectory.sample(times)
    for label in labels or trajectory.compartments:
        ax.plot(data["t"], data[label], linewidth=2, label=f"{label}(t)", color=COLORS.get(label))
    ax.set_xlabel("t / days")
    ax.set_title(title)
    if ylim is not None:
        ax.set_ylim(*ylim)
    ax.legend()
    ax.grid(True, alpha=0.3)
    return _finish(ax, show)


def plot_phase(trajectory,
               times: Sequence[float],
               x: str,
               y: str,
               equilibrium: Optional[Tuple[float, float]] = None,
               ax: Optional[Axes] = None,
               show: bool = True,
               **plot_kwargs) -> Axes:
    """
    Phase portrait of two compartments (e.g. N vs P, or S vs I).

    Parameters
    ----------
    x, y : str
        Compartment labels for the horizontal and vertical axes
    equilibrium : tuple, optional
        Marks a fixed point in the plane
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    data = trajectory.sample(times)
    default_kwargs = {"linewidth": 2, "color": "steelblue"}
    default_kwargs.update(plot_kwargs)
    ax.plot(data[x], data[y], **default_kwargs)
    if equilibrium is not None:
        ax.plot(*equilibrium, marker="o", color="black", label="equilibrium")
        ax.legend()
    ax.set_xlabel(f"{x}(t)")
    ax.set_ylabel(f"{y}(t)")
    ax.set_title("Phaseplane")
    ax.grid(True, alpha=0.3)
    return _finish(ax, show)


def plot_stacked_area(trajectory,
                      times: Sequence[float],
                      population_size: float = 1.0,
                      order: Optional[Sequence[str]] = None,
                      icu_fraction: Optional[float] = None,
                      icu_capacity: float = ICU_CAPACITY,
                      ax: Optional[Axes] = None,
                      show: bool = True) -> Axes:
    """
    Stacked area time course, infected at the bottom.

    With `icu_fraction` set, the intensive-care share of the infected
    and the ICU capacity line are drawn on top.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    data = trajectory.sample(times)
    if order is None:
        # bottom to top
        order = [c for c in ("I", "D", "R", "V", "S") if c in trajectory.compartments]
    layers = [np.maximum(data[c], 0.0) * population_size for c in order]
    ax.stackplot(data["t"], *layers, labels=[f"{c}(t)" for c in order],
                 colors=[COLORS.get(c, None) for c in order])
    if icu_fraction is not None and "I" in trajectory.compartments:
        icu = np.maximum(data["I"], 0.0) * population_size * icu_fraction
        ax.fill_between(data["t"], icu, color="maroon", label=r"$I(t)_{icu}$")
        ax.axhline(icu_capacity, color="black", linestyle="--", linewidth=1, label="ICU capacity")
    ax.set_xlabel("t / days")
    ax.set_title("Timecourse (stacked area)")
    ax.set_xlim(float(data["t"][0]), float(data["t"][-1]))
    ax.legend(loc="upper right")
    return _finish(ax, show)


def plot_new_infections(trajectory,
                        times: Sequence[float],
                        infected_index: int = 1,
                        ax: Optional[Axes] = None,
                        show: bool = True) -> Axes:
    """dI/dt over time"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    times = np.asarray(times, dtype=float)
    ax.plot(times, trajectory.derivative(times, index=infected_index),
            color=COLORS["I"], linewidth=2, label=r"$\frac{dI}{dt}$")
    ax.axhline(0.0, color="black", linewidth=0.5)
    ax.set_xlabel("t / days")
    ax.set_title("New Infections")
    ax.legend()
    return _finish(ax, show)


def plot_growth_panel(kind,
                      params,
                      trajectory,
                      times: Sequence[float],
                      carrying_capacity: Optional[float] = None,
                      show: bool = True) -> Figure:
    """Rate plot and simulated P(t) side by side"""
    fig, (ax_rate, ax_sim) = plt.subplots(1, 2, figsize=(12, 4.5))
    plot_rate(kind, params, carrying_capacity=carrying_capacity, ax=ax_rate, show=False)
    data = trajectory.sample(times)
    ax_sim.plot(data["t"], data["P"], color="red", linewidth=2)
    if carrying_capacity is not None:
        ax_sim.axhline(carrying_capacity, color="darkgrey", linestyle="--")
    ax_sim.set_xlabel("t")
    ax_sim.set_ylabel("P")
    ax_sim.set_title("Simulation")
    if show:
        plt.tight_layout()
        plt.show()
    return fig


def plot_owid(df: pd.DataFrame,
              columns: Sequence[str],
              ax: Optional[Axes] = None,
              show: bool = True) -> Axes:
    """One line per (location, column) from a tidy OWID frame"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    for location, sub in df.groupby("location"):
        for col in columns:
            ax.plot(sub["date"], sub[col], label=f"{location}, {col}")
    ax.set_xlabel("date")
    ax.legend(loc="upper left")
    ax.grid(alpha=0.25)
    return _finish(ax, show)
