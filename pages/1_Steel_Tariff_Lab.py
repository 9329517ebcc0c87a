import logging

import streamlit as st

from tariff_lab.charts import cost_figure, surplus_figure
from tariff_lab.config import PAGE_ICON, PAGE_TITLE, PARAMETER_FIELDS, configure_logging
from tariff_lab.model import run_scenario
from tariff_lab.params import InvalidParameterError, ModelParameters
from tariff_lab.report import interpretation, scenario_csv, summary_table
from tariff_lab.theme import apply_theme

configure_logging()
logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False)
def compute_scenario(values: dict):
    """Rebuild every derived output from the widget values."""
    return run_scenario(ModelParameters.from_mapping(values).validate())


def parameter_widget(key: str):
    label, default, lo, hi, step = PARAMETER_FIELDS[key]
    if key == "tariff_rate_pct":
        return st.slider(label, lo, hi, default, step, key=key)
    return st.number_input(label, min_value=lo, max_value=hi, value=default, step=step, key=key)


st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
apply_theme()

st.title("Steel Industry Cost Curve Under Tariff Protection")
st.caption("Interactive trade-policy experiment with explicit assumptions. Educational use only.")

with st.expander("What this is (and what it is not)", expanded=False):
    st.write(
        "A **teaching model** of infant-industry protection: domestic average cost falls along a learning curve "
        "while a tariff holds the domestic price above the world price. Supply is fixed at the chosen output and "
        "prices are held constant over time; it does **not** solve a market equilibrium or forecast anything."
    )

with st.sidebar:
    st.header("Parameters")
    values = {key: parameter_widget(key) for key in PARAMETER_FIELDS}

try:
    scenario = compute_scenario(values)
except InvalidParameterError as exc:
    logger.warning("Scenario not computed: %s", exc)
    for problem in exc.problems:
        st.error(problem)
    st.info("Adjust the parameters in the sidebar to redraw the charts.")
    st.stop()

e = scenario.summary

colA, colB = st.columns(2, gap="large")
with colA:
    st.markdown("### Cost curve vs. prices")
    st.plotly_chart(cost_figure(scenario.costs), use_container_width=True)
with colB:
    st.markdown("### Surplus analysis")
    st.plotly_chart(surplus_figure(scenario.demand, e, scenario.overlays), use_container_width=True)

st.markdown("### Economic summary")
st.table(summary_table(e))

st.markdown("### Interpretation (teaching-oriented)")
st.write(interpretation(scenario))

st.markdown("### Cost table")
st.dataframe(scenario.costs, use_container_width=True, hide_index=True)

st.divider()
st.markdown("### Export (for tutors)")
st.download_button(
    "Download scenario CSV",
    data=scenario_csv(scenario),
    file_name="steel_tariff_scenario.csv",
    mime="text/csv",
)
