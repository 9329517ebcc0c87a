import math

import pytest

from tariff_lab.config import DEFAULTS
from tariff_lab.params import InvalidParameterError, ModelParameters


def test_defaults_match_widget_table(default_params):
    assert default_params.tariff_rate_pct == 25
    assert default_params.fixed_cost == 1_000_000
    assert default_params.num_years == 10
    assert isinstance(default_params.num_years, int)
    assert default_params.validate() is default_params


def test_from_mapping_fills_missing_keys():
    params = ModelParameters.from_mapping({"tariff_rate_pct": 40})
    assert params.tariff_rate_pct == 40
    assert params.world_price == DEFAULTS["world_price"]


def test_from_mapping_rejects_non_numeric():
    with pytest.raises(InvalidParameterError) as exc:
        ModelParameters.from_mapping({"world_price": "cheap"})
    assert "world_price must be a number" in exc.value.problems[0]


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(InvalidParameterError, match="Unknown parameter: elasticity"):
        ModelParameters.from_mapping({"elasticity": 1.2})


def test_zero_output_is_rejected(default_params):
    with pytest.raises(InvalidParameterError) as exc:
        default_params.replace(output_tons=0).validate()
    assert any("non-positive output" in p for p in exc.value.problems)


def test_zero_slope_is_rejected(default_params):
    with pytest.raises(InvalidParameterError, match="demand_slope must be greater than 0"):
        default_params.replace(demand_slope=0).validate()


@pytest.mark.parametrize("field", ["fixed_cost", "learning_rate", "output_tons", "demand_slope", "world_price"])
def test_negative_values_are_rejected(default_params, field):
    bad = default_params.replace(**{field: -1.0})
    assert f"{field} must be non-negative" in bad.problems()


def test_non_finite_values_are_rejected(default_params):
    bad = default_params.replace(world_price=math.nan, fixed_cost=math.inf)
    problems = bad.problems()
    assert "world_price must be a finite number" in problems
    assert "fixed_cost must be a finite number" in problems


@pytest.mark.parametrize("years", [0, 2.5])
def test_years_must_be_whole_and_positive(default_params, years):
    with pytest.raises(InvalidParameterError, match="num_years"):
        default_params.replace(num_years=years).validate()


def test_years_beyond_widget_range_are_allowed(default_params):
    # The 1-50 bound belongs to the widget, not the model.
    assert default_params.replace(num_years=80).problems() == []


def test_error_is_a_value_error(default_params):
    with pytest.raises(ValueError):
        default_params.replace(output_tons=0).validate()


@pytest.mark.parametrize("bad", ["500", None, True])
def test_non_numeric_fields_are_rejected_by_validate(default_params, bad):
    params = default_params.replace(world_price=bad)
    with pytest.raises(InvalidParameterError) as exc:
        params.validate()
    assert exc.value.problems == [f"world_price must be a number (got {bad!r})"]


def test_non_numeric_output_skips_the_zero_check(default_params):
    problems = default_params.replace(output_tons="lots").problems()
    assert len(problems) == 1
    assert problems[0].startswith("output_tons must be a number")
