import pytest

from tariff_lab.charts import cost_figure, surplus_figure
from tariff_lab.model import run_scenario


def _names(fig):
    return [t.name for t in fig.data]


def test_cost_figure_has_three_lines(default_params):
    fig = cost_figure(run_scenario(default_params).costs)
    assert _names(fig) == ["Average Cost", "Tariff-Adjusted Price", "World Price"]
    assert fig.layout.yaxis.title.text == "Price per Ton ($)"


def test_surplus_figure_skips_empty_overlays(one_year_params):
    s = run_scenario(one_year_params)
    names = _names(surplus_figure(s.demand, s.summary, s.overlays))
    assert "Consumer Loss" in names
    assert "Producer Surplus" in names
    assert "Deadweight Loss" not in names


def test_surplus_figure_draws_deadweight_triangle(one_year_params):
    s = run_scenario(one_year_params.replace(output_tons=5_000))
    fig = surplus_figure(s.demand, s.summary, s.overlays)
    tri = next(t for t in fig.data if t.name == "Deadweight Loss")
    # closed ring: three corners plus the first one again
    assert list(tri.x) == [5_000, 7_500, 5_000, 5_000]


def test_surplus_figure_lines_and_labels(one_year_params):
    s = run_scenario(one_year_params)
    fig = surplus_figure(s.demand, s.summary, s.overlays)
    assert fig.layout.title.text == "Surplus Analysis with Tariff"
    hlines = sorted(shape.y0 for shape in fig.layout.shapes)
    assert hlines == pytest.approx(sorted([s.summary.average_cost, 500.0, 625.0]))
    labels = {a.text for a in fig.layout.annotations}
    assert labels == {"With Tariff", "No Tariff", "Consumer Loss", "Producer Surplus", "Deadweight Loss"}


def test_surplus_figure_axis_ranges(one_year_params):
    s = run_scenario(one_year_params)
    fig = surplus_figure(s.demand, s.summary, s.overlays)
    assert list(fig.layout.xaxis.range) == [0, 20_000]
    assert list(fig.layout.yaxis.range) == [0, 750]
