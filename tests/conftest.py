"""
Shared pytest fixtures for Steel Tariff Lab tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path so pages and the package import without install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tariff_lab.params import ModelParameters


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def default_params():
    """The values the app starts with."""
    return ModelParameters.defaults()


@pytest.fixture
def one_year_params():
    """Worked example: one year of learning at a 25% tariff."""
    return ModelParameters(
        tariff_rate_pct=25,
        fixed_cost=1_000_000,
        initial_variable_cost=500,
        learning_rate=0.1,
        output_tons=10_000,
        world_price=500,
        num_years=1,
        demand_intercept=20_000,
        demand_slope=20,
    )
