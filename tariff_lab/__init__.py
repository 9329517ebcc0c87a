from tariff_lab.model import (
    EquilibriumSummary,
    Polygon,
    Scenario,
    SurplusOverlays,
    cost_curve,
    demand_curve,
    equilibrium,
    run_scenario,
    surplus_overlays,
)
from tariff_lab.params import InvalidParameterError, ModelParameters

__version__ = "0.1.0"
