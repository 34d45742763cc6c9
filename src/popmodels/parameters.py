"""
===============================================================================
parameters.py
Last Updated: 2026-10-18
===============================================================================
Parameter sets for the teaching notebooks

One scenario dataclass per notebook, holding the default slider values of the
interactive version. A scenario builds the model parameters, the initial
state and a ready-to-run Simulation. SLIDERS lists the declared slider
ranges (min, max, step, default) so any UI layer can bind to them.

Changing a slider means building a new scenario with dataclasses.replace();
scenarios are never mutated.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""
from __future__ import annotations
import numpy as np
from dataclasses import dataclass, replace
from typing import Dict

from .growth import GrowthParams, LogisticParams
from .models import ModelKind
from .predator_prey import LotkaVolterraParams
from .simulate import Simulation
from .sir import SIRParams, sir_initial_state
from .sirvd import SIRVDParams, sirvd_initial_state


@dataclass(frozen=True)
class ParameterRange:
    """Declared slider range for one parameter"""
    min: float
    max: float
    step: float
    default: float

    def clip(self, value: float) -> float:
        return float(min(max(value, self.min), self.max))

    def values(self) -> np.ndarray:
        """All slider positions from min to max"""
        n = int(np.floor((self.max - self.min) / self.step + 1e-9))
        return self.min + self.step * np.arange(n + 1)


# ==================== Growth models ===========================================

@dataclass(frozen=True)
class GrowthScenario:
    """Constant or exponential growth of a single population"""
    kind: ModelKind = ModelKind.EXPONENTIAL
    r: float = 0.01     # growth rate constant
    P0: float = 20.0    # initial population size
    t_max: float = 50.0

    def params(self) -> GrowthParams:
        return GrowthParams(r=self.r)

    def initial_state(self) -> np.ndarray:
        return np.array([self.P0], dtype=float)

    def simulation(self) -> Simulation:
        return Simulation(self.kind, self.initial_state(), self.params(), (0.0, self.t_max))

    def to_dict(self) -> Dict:
        return {"model": ModelKind(self.kind).value, "r": self.r, "P0": self.P0, "t_max": self.t_max}

    def print_summary(self):
        print(f"{ModelKind(self.kind).value.upper()} GROWTH:")
        print(f"Growth rate r: {self.r}")
        print(f"Initial population P0: {self.P0}")
        print(f"Time span: 0 - {self.t_max}")


@dataclass(frozen=True)
class LogisticScenario:
    r: float = 0.01     # maximum growth rate
    K: float = 30.0     # carrying capacity
    P0: float = 20.0
    t_max: float = 50.0

    def params(self) -> LogisticParams:
        return LogisticParams(r=self.r, K=self.K)

    def initial_state(self) -> np.ndarray:
        return np.array([self.P0], dtype=float)

    def simulation(self) -> Simulation:
        return Simulation(ModelKind.LOGISTIC, self.initial_state(), self.params(), (0.0, self.t_max))

    def to_dict(self) -> Dict:
        return {"model": "logistic", "r": self.r, "K": self.K, "P0": self.P0, "t_max": self.t_max}

    def print_summary(self):
        print("LOGISTIC GROWTH:")
        print(f"Growth rate r: {self.r}")
        print(f"Carrying capacity K: {self.K}")
        print(f"Initial population P0: {self.P0}")
        print(f"Time span: 0 - {self.t_max}")


# ==================== Predator-prey ===========================================

@dataclass(frozen=True)
class PredatorPreyScenario:
    a: float = 0.2      # prey growth constant
    b: float = 0.02     # prey death constant
    c: float = 0.005    # predator growth constant
    d: float = 0.1      # predator death constant
    N0: float = 50.0    # initial prey
    P0: float = 10.0    # initial predators
    t_max: float = 100.0

    def params(self) -> LotkaVolterraParams:
        return LotkaVolterraParams(a=self.a, b=self.b, c=self.c, d=self.d)

    def initial_state(self) -> np.ndarray:
        return np.array([self.N0, self.P0], dtype=float)

    def simulation(self) -> Simulation:
        return Simulation(ModelKind.LOTKA_VOLTERRA, self.initial_state(), self.params(), (0.0, self.t_max))

    def to_dict(self) -> Dict:
        return {"model": "lotka_volterra", "a": self.a, "b": self.b, "c": self.c, "d": self.d,
                "N0": self.N0, "P0": self.P0, "t_max": self.t_max}

    def print_summary(self):
        N_star, P_star = self.params().equilibrium()
        print("LOTKA-VOLTERRA PREDATOR-PREY:")
        print(f"Prey growth a: {self.a}, predation b: {self.b}")
        print(f"Predator growth c: {self.c}, predator death d: {self.d}")
        print(f"Initial prey N0: {self.N0}, initial predators P0: {self.P0}")
        print(f"Coexistence equilibrium: N* = {N_star:.1f}, P* = {P_star:.1f}")


# ==================== Epidemics ===============================================

@dataclass(frozen=True)
class SIRScenario:
    r: float = 0.125    # transmission rate
    a: float = 0.1      # recovery rate
    I0: float = 0.01    # initial infected fraction
    R0: float = 0.0     # initial resistant fraction
    t_max: float = 100.0
    population_size: int = 9_044_650

    def params(self) -> SIRParams:
        return SIRParams(r=self.r, a=self.a)

    def initial_state(self) -> np.ndarray:
        return sir_initial_state(self.I0, self.R0)

    def simulation(self) -> Simulation:
        return Simulation(ModelKind.SIR, self.initial_state(), self.params(), (0.0, self.t_max))

    def to_dict(self) -> Dict:
        return {"model": "sir", "r": self.r, "a": self.a, "I0": self.I0, "R0": self.R0,
                "t_max": self.t_max, "population_size": self.population_size}

    def print_summary(self):
        S0 = 1.0 - self.I0 - self.R0
        print("SIR MODEL PARAMETERS:")
        print(f"Transmission rate r: {self.r}")
        print(f"Recovery rate a: {self.a}")
        print(f"Initial infected: {self.I0 * 100:.2f}%  resistant: {self.R0 * 100:.2f}%")
        print(f"Basic reproduction number: {self.r * S0 / self.a:.3g}" if self.a else
              "Basic reproduction number: inf")
        print(f"Population size: {self.population_size:,}")


@dataclass(frozen=True)
class SIRVDScenario:
    r: float = 0.125    # transmission rate
    a: float = 0.1      # recovery rate
    v: float = 0.0008   # vaccination rate
    m: float = 0.0006   # mortality
    immunity_recovered: float = 60.0    # % immunity of recovered
    immunity_vaccinated: float = 90.0   # % immunity of vaccinated
    I0: float = 0.004
    R0: float = 0.055
    V0: float = 0.048
    D0: float = 0.001
    t_max: float = 100.0
    population_size: int = 9_044_650

    def params(self) -> SIRVDParams:
        return SIRVDParams.from_percent_immunity(
            self.r, self.a, self.v, self.m, self.immunity_recovered, self.immunity_vaccinated
        )

    def initial_state(self) -> np.ndarray:
        return sirvd_initial_state(self.I0, self.R0, self.V0, self.D0)

    def simulation(self) -> Simulation:
        return Simulation(ModelKind.SIRVD, self.initial_state(), self.params(), (0.0, self.t_max))

    def to_dict(self) -> Dict:
        return {"model": "sirvd", "r": self.r, "a": self.a, "v": self.v, "m": self.m,
                "immunity_recovered": self.immunity_recovered,
                "immunity_vaccinated": self.immunity_vaccinated,
                "I0": self.I0, "R0": self.R0, "V0": self.V0, "D0": self.D0,
                "t_max": self.t_max, "population_size": self.population_size}

    def print_summary(self):
        S0 = 1.0 - self.I0 - self.R0 - self.V0 - self.D0
        print("SIRVD MODEL PARAMETERS:")
        print("\n--- EPIDEMIOLOGY ---")
        print(f"Transmission rate r: {self.r}")
        print(f"Recovery rate a: {self.a}")
        print(f"Mortality m: {self.m}")
        print(f"Basic reproduction number: {self.r * S0 / self.a:.3g}" if self.a else
              "Basic reproduction number: inf")
        print("\n--- IMMUNITY ---")
        print(f"Vaccination rate v: {self.v}")
        print(f"Immunity recovered: {self.immunity_recovered:.0f}%")
        print(f"Immunity vaccinated: {self.immunity_vaccinated:.0f}%")
        print("\n--- POPULATION ---")
        print(f"Population size: {self.population_size:,}")


SLIDERS: Dict[str, Dict[str, ParameterRange]] = {
    "constant": {
        "r": ParameterRange(-0.5, 0.5, 0.01, 0.01),
        "P0": ParameterRange(0, 100, 5, 20),
    },
    "exponential": {
        "r": ParameterRange(-0.25, 0.25, 0.01, 0.01),
        "P0": ParameterRange(0, 100, 5, 20),
    },
    "logistic": {
        "r": ParameterRange(0, 0.25, 0.001, 0.01),
        "K": ParameterRange(1, 80, 5, 30),
        "P0": ParameterRange(1, 100, 5, 20),
    },
    "lotka_volterra": {
        "a": ParameterRange(0, 0.25, 0.001, 0.2),
        "b": ParameterRange(0, 0.25, 0.001, 0.02),
        "c": ParameterRange(0, 0.25, 0.001, 0.005),
        "d": ParameterRange(0, 0.25, 0.001, 0.1),
        "N0": ParameterRange(1, 100, 1, 50),
        "P0": ParameterRange(1, 100, 1, 10),
        "t_max": ParameterRange(1, 5000, 5, 100),
    },
    "sir": {
        "r": ParameterRange(0, 1, 0.005, 0.125),
        "a": ParameterRange(0, 0.25, 0.001, 0.1),
        "I0": ParameterRange(0.0001, 0.1, 0.001, 0.01),
        "R0": ParameterRange(0, 0.1, 0.001, 0.0),
        "t_max": ParameterRange(10, 2000, 10, 100),
    },
    "sirvd": {
        "r": ParameterRange(0, 1, 0.005, 0.125),
        "a": ParameterRange(0, 0.25, 0.001, 0.1),
        "v": ParameterRange(0, 0.01, 0.0001, 0.0008),
        "m": ParameterRange(0, 0.05, 0.0001, 0.0006),
        "immunity_recovered": ParameterRange(0, 100, 1, 60),
        "immunity_vaccinated": ParameterRange(0, 100, 1, 90),
        "I0": ParameterRange(0.0001, 0.1, 0.001, 0.004),
        "R0": ParameterRange(0, 0.1, 0.001, 0.055),
        "V0": ParameterRange(0, 0.1, 0.001, 0.048),
        "D0": ParameterRange(0, 0.1, 0.001, 0.001),
        "t_max": ParameterRange(10, 2000, 10, 100),
    },
}


# Alternative scenarios
def create_constant_growth_scenario():
    return GrowthScenario(kind=ModelKind.CONSTANT)


def create_no_vaccination_scenario():
    """SIRVD without vaccination and nobody vaccinated at the start"""
    return replace(SIRVDScenario(), v=0.0, V0=0.0)


def create_waning_immunity_scenario():
    """Recovered people keep little protection against reinfection"""
    return replace(SIRVDScenario(), immunity_recovered=20.0)


if __name__ == "__main__":
    SIRVDScenario().print_summary()

    print("\nScenario dictionary:")
    import pprint
    pprint.pprint(SIRVDScenario().to_dict())
