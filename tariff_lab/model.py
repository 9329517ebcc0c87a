"""
Learning-curve cost model, linear demand and tariff surplus decomposition.

Everything here is a pure function of a validated ModelParameters: callers
rebuild all outputs from scratch whenever a parameter changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from tariff_lab.config import DEMAND_PRICE_SPAN, DEMAND_SAMPLE_POINTS
from tariff_lab.params import InvalidParameterError, ModelParameters

logger = logging.getLogger(__name__)

COST_COLUMNS = ["Year", "Average Cost", "Tariff-Adjusted Price", "World Price"]


def require_finite(**values) -> None:
    """Reject parameter sets whose derived values overflow to inf or NaN."""
    bad = [name for name, value in values.items() if not np.all(np.isfinite(value))]
    if bad:
        logger.warning("Parameters overflow the model: %s", bad)
        raise InvalidParameterError([f"parameters overflow the model: {', '.join(bad)} not finite"])


def tariff_price(params: ModelParameters) -> float:
    return params.world_price * (1 + params.tariff_rate_pct / 100)


def average_cost(params: ModelParameters, year) -> np.ndarray | float:
    """Fixed cost per ton plus variable cost decayed by exp(-λ·year)."""
    decay = np.exp(-params.learning_rate * np.asarray(year, dtype=float))
    ac = params.fixed_cost / params.output_tons + params.initial_variable_cost * decay
    return float(ac) if np.ndim(ac) == 0 else ac


def cost_curve(params: ModelParameters) -> pd.DataFrame:
    """Average cost per year 0..num_years against world and tariff price."""
    params.validate()
    years = np.arange(int(params.num_years) + 1)
    ac = average_cost(params, years)
    pt = tariff_price(params)
    require_finite(average_cost=ac, tariff_price=pt)

    # Prices are held flat across the horizon.
    df = pd.DataFrame({
        "Year": years,
        "Average Cost": ac,
        "Tariff-Adjusted Price": np.full(years.size, pt, dtype=float),
        "World Price": np.full(years.size, float(params.world_price)),
    })
    logger.debug("cost curve: %d years, AC %.2f -> %.2f", years.size, ac[0], ac[-1])
    return df


def demand_curve(params: ModelParameters, n_points: int = DEMAND_SAMPLE_POINTS) -> pd.DataFrame:
    """Sample Q = a - bP on evenly spaced prices over [0, 1.5·world price]."""
    params.validate()
    prices = np.linspace(0.0, params.world_price * DEMAND_PRICE_SPAN, n_points)
    # Negative quantities past the choke price are left for the chart to clip.
    quantities = params.demand_intercept - params.demand_slope * prices
    require_finite(price=prices, quantity=quantities)
    return pd.DataFrame({"Price": prices, "Quantity": quantities})


@dataclass(frozen=True)
class EquilibriumSummary:
    world_price: float
    tariff_price: float
    average_cost: float
    qd_world: float
    qd_tariff: float
    qs: float
    cs_world: float
    cs_tariff: float
    ps_tariff: float
    deadweight_loss: float
    demand_intercept: float
    demand_slope: float

    @property
    def consumer_loss(self) -> float:
        return self.cs_world - self.cs_tariff

    @property
    def choke_price(self) -> float:
        return self.demand_intercept / self.demand_slope


def consumer_surplus(qd: float, price: float, a: float, b: float) -> float:
    """Triangle under the demand curve above `price`: ½·Qd·(a/b − P)."""
    return 0.5 * qd * (a / b - price)


def equilibrium(params: ModelParameters) -> EquilibriumSummary:
    """Free trade vs tariff outcomes at the end of the cost horizon."""
    params.validate()
    a, b = params.demand_intercept, params.demand_slope
    pw = float(params.world_price)
    pt = tariff_price(params)
    ac = average_cost(params, params.num_years)

    qd_w = a - b * pw
    qd_t = a - b * pt
    # Supply is fixed at output and perfectly elastic at AC, not solved against demand.
    qs = float(params.output_tons)

    cs_w = consumer_surplus(qd_w, pw, a, b)
    cs_t = consumer_surplus(qd_t, pt, a, b)
    ps_t = (pt - ac) * qs
    # max() would hide a NaN, so check the unclamped terms first.
    require_finite(
        average_cost=ac, tariff_price=pt, choke_price=a / b, qd_world=qd_w, qd_tariff=qd_t,
        cs_world=cs_w, cs_tariff=cs_t, consumer_loss=cs_w - cs_t, ps_tariff=ps_t,
        deadweight_loss=cs_w - cs_t - ps_t,
    )
    dwl = max(0.0, cs_w - cs_t - ps_t)

    summary = EquilibriumSummary(
        world_price=pw,
        tariff_price=pt,
        average_cost=ac,
        qd_world=qd_w,
        qd_tariff=qd_t,
        qs=qs,
        cs_world=cs_w,
        cs_tariff=cs_t,
        ps_tariff=ps_t,
        deadweight_loss=dwl,
        demand_intercept=float(a),
        demand_slope=float(b),
    )
    logger.debug("equilibrium: Pt=%.2f AC=%.2f DWL=%.0f", pt, ac, dwl)
    return summary


# ---------- surplus geometry ----------
@dataclass(frozen=True)
class Polygon:
    quantities: tuple[float, ...]
    prices: tuple[float, ...]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"Quantity": self.quantities, "Price": self.prices})


@dataclass(frozen=True)
class SurplusOverlays:
    """Chart overlays; None means "draw nothing" for that region."""

    consumer_loss: Polygon | None
    producer_surplus: Polygon
    deadweight_loss: Polygon | None


def consumer_loss_polygon(e: EquilibriumSummary) -> Polygon | None:
    if not e.qd_world > e.qd_tariff:
        return None
    return Polygon(
        quantities=(e.qd_tariff, e.qd_world, e.qd_world, e.qd_tariff),
        prices=(e.tariff_price, e.tariff_price, e.world_price, e.world_price),
    )


def producer_surplus_polygon(e: EquilibriumSummary) -> Polygon:
    return Polygon(
        quantities=(0.0, e.qs, e.qs, 0.0),
        prices=(e.average_cost, e.average_cost, e.tariff_price, e.tariff_price),
    )


def deadweight_loss_polygon(e: EquilibriumSummary) -> Polygon | None:
    # Without this guard the triangle folds back on itself.
    if not e.qd_tariff > e.qs:
        return None
    return Polygon(
        quantities=(e.qs, e.qd_tariff, e.qs),
        prices=(e.tariff_price, e.tariff_price, (e.demand_intercept - e.qs) / e.demand_slope),
    )


def surplus_overlays(e: EquilibriumSummary) -> SurplusOverlays:
    return SurplusOverlays(
        consumer_loss=consumer_loss_polygon(e),
        producer_surplus=producer_surplus_polygon(e),
        deadweight_loss=deadweight_loss_polygon(e),
    )


@dataclass(frozen=True)
class Scenario:
    """All derived outputs for one parameter set."""

    params: ModelParameters
    costs: pd.DataFrame
    demand: pd.DataFrame
    summary: EquilibriumSummary
    overlays: SurplusOverlays


def run_scenario(params: ModelParameters) -> Scenario:
    params.validate()
    summary = equilibrium(params)
    return Scenario(
        params=params,
        costs=cost_curve(params),
        demand=demand_curve(params),
        summary=summary,
        overlays=surplus_overlays(summary),
    )
