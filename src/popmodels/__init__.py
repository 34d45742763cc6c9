from .models import MODELS, Model, ModelKind, get_model, rate_curve
from .simulate import IntegrationError, PlausibilityWarning, Simulation, Trajectory, simulate
from .summary import basic_reproduction_number, infectious_period, report_table, report_value
