import streamlit as st

from tariff_lab.config import APP_NAME, configure_logging
from tariff_lab.theme import apply_theme

configure_logging()

st.set_page_config(page_title=APP_NAME, page_icon="📘", layout="wide")

apply_theme()

st.markdown("""
<div class="cf-hero">
  <div class="cf-brand">Chaouat Economics Lab</div>
  <div class="cf-sub">
    A tutoring-first economics platform. Interactive policy labs with methodological transparency and explicit assumptions,
    starting with trade policy: what a tariff does to a learning domestic industry and to the consumers who buy from it.
  </div>
</div>
""", unsafe_allow_html=True)

c1, c2 = st.columns(2, gap="large")

with c1:
    st.markdown('<div class="cf-card"><h3>Steel Tariff Lab</h3><p>Learning-curve costs for a protected steel industry, with the consumer surplus, producer surplus and deadweight loss a tariff creates.</p></div>', unsafe_allow_html=True)
with c2:
    st.markdown('<div class="cf-card"><h3>How to use it</h3><p>Change one parameter at a time in the sidebar. Every chart and table is recomputed from scratch, and the scenario can be exported as CSV for a session.</p></div>', unsafe_allow_html=True)

st.markdown("")
st.info("Open **Steel Tariff Lab** from the left menu. Start from the defaults, then raise the tariff or the learning rate and watch the shaded areas.")
st.caption("© Chaouat Economics Lab · Built with Python/Streamlit · Educational use only")
