import streamlit as st

# Cerulean Montserrat look shared by every page of the lab.
BRAND_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Montserrat:wght@400;600;700&display=swap');
:root{
  --primary:#007BA7;
  --primary-dark:#005F7D;
  --accent:#00B0FF;
  --card:#FFFFFF;
  --muted:#64748B;
}
html, body, * { font-family: 'Montserrat', sans-serif !important; }
.cf-hero{
  background: linear-gradient(135deg, var(--primary) 0%, var(--accent) 100%);
  color: #fff;
  padding: 30px 34px;
  border-radius: 20px;
  box-shadow: 0 8px 24px rgba(0,123,167,.25);
  margin: 8px 0 20px 0;
}
.cf-brand{ font-weight: 800; font-size: 42px; letter-spacing: .3px; }
.cf-sub{ margin-top: 8px; opacity: .95; font-size: 16px; line-height: 1.5; max-width: 900px; }
.cf-card{
  background: var(--card);
  border: 1px solid #E2E8F0;
  border-radius: 16px;
  padding: 18px;
  box-shadow: 0 4px 18px rgba(15,23,42,.06);
}
.stDownloadButton>button{
  background: var(--primary) !important; color: #fff !important; border: 0 !important;
  border-radius: 12px !important;
}
.stDownloadButton>button:hover{ background: var(--primary-dark) !important; }
small { color: var(--muted); }
</style>
"""


def apply_theme():
    st.markdown(BRAND_CSS, unsafe_allow_html=True)
