import logging
import os

# --- Page ---
APP_NAME = "Chaouat Economics Lab"
PAGE_TITLE = f"Steel Tariff Lab — {APP_NAME}"
PAGE_ICON = "🏭"

# --- Logging ---
LOG_LEVEL_ENV = "TARIFF_LAB_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# --- Model ---
DEMAND_SAMPLE_POINTS = 100
DEMAND_PRICE_SPAN = 1.5  # demand curve is sampled on [0, 1.5 * world price]

# Widget table: key -> (label, default, min, max, step).
# min/max are widget bounds only; the model enforces its own domain rules.
PARAMETER_FIELDS = {
    "tariff_rate_pct": ("Tariff Rate (%)", 25, 0, 100, 1),
    "fixed_cost": ("Fixed Cost ($)", 1_000_000.0, 0.0, None, None),
    "initial_variable_cost": ("Initial Variable Cost per Ton ($)", 500.0, 0.0, None, None),
    "learning_rate": ("Learning Rate (λ)", 0.1, None, None, 0.01),
    "output_tons": ("Output (Tons)", 10_000.0, None, None, None),
    "world_price": ("World Price ($)", 500.0, None, None, None),
    "num_years": ("Number of Years", 10, 1, 50, 1),
    "demand_intercept": ("Demand Intercept (a)", 20_000.0, None, None, None),
    "demand_slope": ("Demand Slope (b)", 20.0, None, None, None),
}

DEFAULTS = {key: spec[1] for key, spec in PARAMETER_FIELDS.items()}

# --- Chart colours (cerulean theme + original surplus palette) ---
COLORS = {
    "Average Cost": "#007BA7",
    "Tariff-Adjusted Price": "red",
    "World Price": "black",
    "demand": "blue",
    "consumer_loss": "rgba(135,206,235,0.4)",   # skyblue
    "producer_surplus": "rgba(84,139,84,0.5)",  # palegreen4
    "deadweight_loss": "rgba(255,69,0,0.4)",    # orangered
    "supply": "darkgreen",
}


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; level from arg, env var, or INFO."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=LOG_FORMAT)
    root.setLevel(numeric)
