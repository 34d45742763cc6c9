import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from popmodels.parameters import PredatorPreyScenario, SIRScenario, SIRVDScenario


@pytest.fixture
def sir_trajectory():
    return SIRScenario(t_max=200.0).simulation().run()


@pytest.fixture
def sirvd_trajectory():
    return SIRVDScenario(t_max=400.0).simulation().run()


@pytest.fixture
def lv_trajectory():
    return PredatorPreyScenario().simulation().run()


@pytest.fixture
def grid():
    return np.linspace(0.0, 100.0, 201)
