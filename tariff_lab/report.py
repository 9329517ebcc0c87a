from dataclasses import asdict

import pandas as pd

from tariff_lab.config import PARAMETER_FIELDS
from tariff_lab.model import EquilibriumSummary, Scenario


def summary_table(e: EquilibriumSummary) -> pd.DataFrame:
    """One-row economic summary, rounded for display (prices 2 dp, areas whole units)."""
    return pd.DataFrame([{
        "Avg Cost": round(e.average_cost, 2),
        "World Price": round(e.world_price, 2),
        "Tariff Price": round(e.tariff_price, 2),
        "Consumer Loss": round(e.consumer_loss),
        "Producer Surplus": round(e.ps_tariff),
        "Deadweight Loss": round(e.deadweight_loss),
    }])


def parameters_table(scenario: Scenario) -> pd.DataFrame:
    rows = [
        {"Parameter": PARAMETER_FIELDS[k][0], "Value": v}
        for k, v in asdict(scenario.params).items()
    ]
    return pd.DataFrame(rows)


def scenario_csv(scenario: Scenario) -> bytes:
    """Parameters, summary and the cost series as one CSV for tutors."""
    parts = [
        ("# Parameters", parameters_table(scenario)),
        ("# Economic summary", summary_table(scenario.summary)),
        ("# Cost curve", scenario.costs),
    ]
    text = "\n".join(f"{title}\n{df.to_csv(index=False)}" for title, df in parts)
    return text.encode("utf-8")


def interpretation(scenario: Scenario) -> str:
    """Markdown bullets reading the scenario back to students."""
    e = scenario.summary
    gap = round(e.tariff_price - e.average_cost, 2)
    if gap > 0:
        position = f"below the tariff price by ${gap:,.2f}"
    elif gap < 0:
        position = f"above the tariff price by ${-gap:,.2f}"
    else:
        position = "exactly at the tariff price"
    return (
        f"- The tariff lifts the domestic price from **${e.world_price:,.2f}** to **${e.tariff_price:,.2f}**.\n"
        f"- After {scenario.params.num_years} years of learning, average cost is **${e.average_cost:,.2f}** per ton "
        f"({position}).\n"
        f"- Consumers lose about **${e.consumer_loss:,.0f}**; deadweight loss is about **${e.deadweight_loss:,.0f}**."
    )
