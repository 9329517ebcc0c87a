import pandas as pd
import plotly.graph_objects as go

from tariff_lab.config import COLORS
from tariff_lab.model import COST_COLUMNS, EquilibriumSummary, Polygon, SurplusOverlays

LAYOUT = dict(height=430, margin=dict(l=10, r=10, t=40, b=10), legend=dict(orientation="h", y=1.02, x=0))


def cost_figure(costs: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    for col in COST_COLUMNS[1:]:
        fig.add_trace(go.Scatter(
            x=costs["Year"], y=costs[col], mode="lines", name=col,
            line=dict(color=COLORS[col]),
        ))
    fig.update_layout(**LAYOUT)
    fig.update_xaxes(title_text="Year")
    fig.update_yaxes(title_text="Price per Ton ($)")
    return fig


def _polygon_trace(poly: Polygon, name: str, fill: str) -> go.Scatter:
    # Close the ring so "toself" fills the whole shape.
    xs = list(poly.quantities) + [poly.quantities[0]]
    ys = list(poly.prices) + [poly.prices[0]]
    return go.Scatter(
        x=xs, y=ys, mode="lines", fill="toself", name=name,
        fillcolor=fill, line=dict(width=0), hoverinfo="name",
    )


def surplus_figure(demand: pd.DataFrame, e: EquilibriumSummary, overlays: SurplusOverlays) -> go.Figure:
    """Demand curve with consumer loss, producer surplus and deadweight loss shaded."""
    qd_t = max(0.0, e.qd_tariff)
    qs = e.qs

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=demand["Quantity"], y=demand["Price"], mode="lines", name="Demand",
        line=dict(color=COLORS["demand"], width=3),
    ))

    shaded = [
        (overlays.consumer_loss, "Consumer Loss", COLORS["consumer_loss"]),
        (overlays.producer_surplus, "Producer Surplus", COLORS["producer_surplus"]),
        (overlays.deadweight_loss, "Deadweight Loss", COLORS["deadweight_loss"]),
    ]
    for poly, name, fill in shaded:
        if poly is not None:
            fig.add_trace(_polygon_trace(poly, name, fill))

    # Supply at AC, then the two price lines
    fig.add_hline(y=e.average_cost, line_dash="solid", line_color=COLORS["supply"], line_width=2)
    fig.add_hline(y=e.world_price, line_dash="dash", line_color="black")
    fig.add_hline(y=e.tariff_price, line_dash="dot", line_color="red")

    fig.add_trace(go.Scatter(
        x=[e.qd_world], y=[e.world_price], mode="markers", name="No Tariff",
        marker=dict(color="black", size=10), showlegend=False,
    ))
    fig.add_trace(go.Scatter(
        x=[qd_t], y=[e.tariff_price], mode="markers", name="With Tariff",
        marker=dict(color="red", size=10), showlegend=False,
    ))

    notes = [
        (qd_t + 300, e.tariff_price + 10, "With Tariff", "red"),
        (e.qd_world + 300, e.world_price + 10, "No Tariff", "black"),
        (qs / 2, e.tariff_price + 40, "Consumer Loss", "blue"),
        (qs / 2, e.average_cost - 20, "Producer Surplus", "darkgreen"),
        (qs + 200, e.tariff_price + 20, "Deadweight Loss", "orangered"),
    ]
    for x, y, text, color in notes:
        fig.add_annotation(x=x, y=y, text=text, showarrow=False, font=dict(color=color))

    x_max = max(float(demand["Quantity"].max()), qd_t + 1000)
    y_max = max(float(demand["Price"].max()), e.tariff_price + 50)
    fig.update_layout(title="Surplus Analysis with Tariff", **LAYOUT)
    fig.update_xaxes(title_text="Quantity", range=[0, x_max])
    fig.update_yaxes(title_text="Price ($)", range=[0, y_max])
    return fig
