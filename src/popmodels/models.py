"""
===========================================================
models.py
Last Updated: 2026-10-18
===========================================================

Description:
    Registry of the model families. Each family is a Model value
    carrying its compartment labels, parameter type and a pure
    derivative(state, params, t) function, selected explicitly by
    ModelKind instead of per-notebook function names.

Example Usage:
    from popmodels.models import ModelKind, get_model
    model = get_model(ModelKind.LOGISTIC)
    dP = model.derivative([20.0], model.params_type(r=0.01, K=30), 0.0)

Notes:
    - `conserved` marks compartmental models whose compartments
      sum to a constant total (SIR, SIRVD).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Sequence, Tuple, Union

from . import growth, predator_prey, sir, sirvd


class ModelKind(str, Enum):
    CONSTANT = "constant"
    EXPONENTIAL = "exponential"
    LOGISTIC = "logistic"
    LOTKA_VOLTERRA = "lotka_volterra"
    SIR = "sir"
    SIRVD = "sirvd"


@dataclass(frozen=True)
class Model:
    kind: ModelKind
    compartments: Tuple[str, ...]
    derivative: Callable[..., np.ndarray]
    params_type: type
    conserved: bool = False

    @property
    def n_compartments(self) -> int:
        return len(self.compartments)

    def __call__(self, state, params, t: float = 0.0) -> np.ndarray:
        return self.derivative(state, params, t)


MODELS: Dict[ModelKind, Model] = {
    ModelKind.CONSTANT: Model(ModelKind.CONSTANT, ("P",), growth.constant_growth, growth.GrowthParams),
    ModelKind.EXPONENTIAL: Model(ModelKind.EXPONENTIAL, ("P",), growth.exponential_growth, growth.GrowthParams),
    ModelKind.LOGISTIC: Model(ModelKind.LOGISTIC, ("P",), growth.logistic_growth, growth.LogisticParams),
    ModelKind.LOTKA_VOLTERRA: Model(
        ModelKind.LOTKA_VOLTERRA, ("N", "P"), predator_prey.lotka_volterra, predator_prey.LotkaVolterraParams
    ),
    ModelKind.SIR: Model(ModelKind.SIR, sir.COMPARTMENTS, sir.sir, sir.SIRParams, conserved=True),
    ModelKind.SIRVD: Model(ModelKind.SIRVD, sirvd.COMPARTMENTS, sirvd.sirvd, sirvd.SIRVDParams, conserved=True),
}


def get_model(kind: Union[Model, ModelKind, str]) -> Model:
    """Look up a model by kind; a Model instance is passed through"""
    if isinstance(kind, Model):
        return kind
    try:
        return MODELS[ModelKind(kind)]
    except ValueError:
        raise KeyError(f"Unknown model kind '{kind}'. Available: {[k.value for k in ModelKind]}") from None


def rate_curve(kind: Union[Model, ModelKind, str], params, values: Sequence[float]) -> np.ndarray:
    """
    Growth rate dP/dt evaluated over a range of population sizes.

    This is the "rate plot" of a single-population model: derivative
    on the y-axis, state on the x-axis.

    Parameters:
    kind: model or model kind (single-compartment only)
    params: parameter value for that model
    values: population sizes at which to evaluate the rate

    Returns:
    rates: np.ndarray. Same length as values
    """
    model = get_model(kind)
    if model.n_compartments != 1:
        raise ValueError(f"rate_curve needs a single-compartment model, got {model.kind.value}")
    values = np.asarray(values, dtype=float)
    return np.array([model.derivative([p], params, 0.0)[0] for p in values])
