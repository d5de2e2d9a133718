"""Tests for the scenario valuation engine."""

import math

import pytest

from tests.conftest import make_benchmark, make_selections
from vmx.engine.errors import MissingRateError, ValidationError
from vmx.engine.evaluator import ScenarioEvaluator, evaluate
from vmx.models.catalog import DEFAULT_CATALOG
from vmx.models.enums import Band
from vmx.models.inputs import Selection, default_selections


class TestScenarioEvaluator:
    def test_costs_are_area_times_rate(self, result_a):
        costs = {c.category_id: c.cost for c in result_a.categories}
        assert costs["X"] == pytest.approx(500)
        assert costs["Y"] == pytest.approx(1000)
        assert costs["Z"] == pytest.approx(200)
        assert result_a.total_cost == pytest.approx(1700)

    def test_band_selects_rate(self, xyz_evaluator, xyz_catalog, benchmark_a):
        selections = make_selections(xyz_catalog, X=Band.HIGH, Z=Band.LOW)
        result = xyz_evaluator.evaluate(1000, benchmark_a, selections)
        assert result.category("X").cost == pytest.approx(1000)  # 0.50 * 2.0
        assert result.category("Y").cost == pytest.approx(1000)
        assert result.category("Z").cost == pytest.approx(100)  # 0.20 * 0.5

    def test_categories_in_catalog_order(self, xyz_evaluator, xyz_catalog, benchmark_a):
        shuffled = list(reversed(make_selections(xyz_catalog)))
        result = xyz_evaluator.evaluate(1000, benchmark_a, shuffled)
        assert [c.category_id for c in result.categories] == ["X", "Y", "Z"]

    def test_labels_come_from_catalog(self, result_a):
        assert [c.label for c in result_a.categories] == [
            "Category X",
            "Category Y",
            "Category Z",
        ]

    def test_cost_sum_equals_total(self, result_a):
        assert math.fsum(c.cost for c in result_a.categories) == pytest.approx(
            result_a.total_cost, rel=1e-9
        )

    def test_pct_sums_to_one(self, result_a):
        assert sum(c.pct_of_total for c in result_a.categories) == pytest.approx(1.0)
        assert result_a.category("Y").pct_of_total == pytest.approx(1000 / 1700)

    def test_zero_total_gives_zero_pct(self, xyz_evaluator, xyz_selections):
        zero = make_benchmark({"X": 0.0, "Y": 0.0, "Z": 0.0})
        result = xyz_evaluator.evaluate(1000, zero, xyz_selections)
        assert result.total_cost == 0.0
        assert all(c.pct_of_total == 0.0 for c in result.categories)

    def test_currency_copied_verbatim(self, xyz_evaluator, xyz_selections):
        gbp = make_benchmark({"X": 1.0, "Y": 1.0, "Z": 1.0}, currency="GBP")
        result = xyz_evaluator.evaluate(10, gbp, xyz_selections)
        assert result.currency == "GBP"

    def test_identical_inputs_identical_output(
        self, xyz_evaluator, benchmark_a, xyz_selections
    ):
        first = xyz_evaluator.evaluate(1234.5, benchmark_a, xyz_selections)
        second = xyz_evaluator.evaluate(1234.5, benchmark_a, xyz_selections)
        assert first == second

    def test_inputs_not_mutated(self, xyz_evaluator, benchmark_a, xyz_selections):
        before = list(xyz_selections)
        rates_before = benchmark_a.model_dump()
        xyz_evaluator.evaluate(1000, benchmark_a, xyz_selections)
        assert xyz_selections == before
        assert benchmark_a.model_dump() == rates_before

    def test_extra_benchmark_categories_ignored(self, xyz_evaluator, xyz_selections):
        benchmark = make_benchmark({"X": 1.0, "Y": 1.0, "Z": 1.0, "W": 9.0})
        result = xyz_evaluator.evaluate(10, benchmark, xyz_selections)
        assert len(result.categories) == 3
        assert result.total_cost == pytest.approx(30)

    def test_string_band_accepted(self, xyz_evaluator, benchmark_a):
        selections = [
            Selection(category_id="X", band="HIGH"),
            Selection(category_id="Y", band="MEDIUM"),
            Selection(category_id="Z", band="LOW"),
        ]
        result = xyz_evaluator.evaluate(1000, benchmark_a, selections)
        assert result.category("X").cost == pytest.approx(1000)


class TestEvaluatorValidation:
    @pytest.mark.parametrize("area", [0, -1, -0.5, float("nan"), float("inf")])
    def test_invalid_area_raises(self, xyz_evaluator, benchmark_a, xyz_selections, area):
        with pytest.raises(ValidationError, match="Area"):
            xyz_evaluator.evaluate(area, benchmark_a, xyz_selections)

    @pytest.mark.parametrize("area", ["1000", None, True])
    def test_non_numeric_area_raises(
        self, xyz_evaluator, benchmark_a, xyz_selections, area
    ):
        with pytest.raises(ValidationError, match="Area must be a number"):
            xyz_evaluator.evaluate(area, benchmark_a, xyz_selections)

    def test_missing_selection_raises(self, xyz_evaluator, benchmark_a, xyz_selections):
        with pytest.raises(ValidationError, match="Missing selection") as exc_info:
            xyz_evaluator.evaluate(1000, benchmark_a, xyz_selections[:2])
        assert exc_info.value.category_id == "Z"

    def test_duplicate_selection_raises(self, xyz_evaluator, benchmark_a, xyz_selections):
        selections = xyz_selections + [Selection(category_id="Y", band=Band.HIGH)]
        with pytest.raises(ValidationError, match="Duplicate") as exc_info:
            xyz_evaluator.evaluate(1000, benchmark_a, selections)
        assert exc_info.value.category_id == "Y"

    def test_unknown_category_raises(self, xyz_evaluator, benchmark_a, xyz_selections):
        selections = xyz_selections + [Selection(category_id="Q", band=Band.LOW)]
        with pytest.raises(ValidationError, match="Unknown category"):
            xyz_evaluator.evaluate(1000, benchmark_a, selections)

    def test_invalid_band_raises(self, xyz_evaluator, benchmark_a):
        selections = [
            Selection(category_id="X", band="EXTREME"),
            Selection(category_id="Y", band=Band.LOW),
            Selection(category_id="Z", band=Band.LOW),
        ]
        with pytest.raises(ValidationError, match="Invalid band"):
            xyz_evaluator.evaluate(1000, benchmark_a, selections)

    def test_missing_rate_raises(self, xyz_evaluator, xyz_selections):
        partial = make_benchmark({"X": 1.0, "Y": 1.0})
        with pytest.raises(MissingRateError) as exc_info:
            xyz_evaluator.evaluate(1000, partial, xyz_selections)
        assert exc_info.value.category_id == "Z"
        assert exc_info.value.band == Band.MEDIUM

    def test_missing_band_raises(self, xyz_evaluator, xyz_catalog, benchmark_a):
        thin = benchmark_a.model_copy(
            update={"rates": {**benchmark_a.rates, "Y": {Band.MEDIUM: 1.0}}}
        )
        selections = make_selections(xyz_catalog, Y=Band.HIGH)
        with pytest.raises(MissingRateError, match="'Y' at band HIGH"):
            xyz_evaluator.evaluate(1000, thin, selections)

    def test_negative_rate_from_custom_table_raises(self, xyz_evaluator, xyz_selections):
        class NegativeTable:
            currency = "USD"

            def rate(self, category_id, band):
                return -1.0

        with pytest.raises(ValidationError, match="non-negative"):
            xyz_evaluator.evaluate(1000, NegativeTable(), xyz_selections)

    def test_oversized_integer_area_raises(
        self, xyz_evaluator, benchmark_a, xyz_selections
    ):
        with pytest.raises(ValidationError, match="finite number"):
            xyz_evaluator.evaluate(10**400, benchmark_a, xyz_selections)

    def test_category_cost_overflow_raises(self, xyz_evaluator, xyz_selections):
        benchmark = make_benchmark({"X": 10.0, "Y": 10.0, "Z": 10.0})
        with pytest.raises(ValidationError, match="overflows") as exc_info:
            xyz_evaluator.evaluate(1e308, benchmark, xyz_selections)
        assert exc_info.value.category_id == "X"

    def test_total_cost_overflow_raises(self, xyz_evaluator, xyz_selections):
        # each cost is finite, the sum is not
        benchmark = make_benchmark({"X": 1.0, "Y": 1.0, "Z": 1.0})
        with pytest.raises(ValidationError, match="Total cost overflows"):
            xyz_evaluator.evaluate(1e308, benchmark, xyz_selections)


class TestDefaultCatalog:
    def test_module_evaluate_uses_default_catalog(self):
        benchmark = make_benchmark({c.id: 1.0 for c in DEFAULT_CATALOG})
        result = evaluate(100, benchmark, default_selections())
        assert [c.category_id for c in result.categories] == DEFAULT_CATALOG.ids()
        assert result.total_cost == pytest.approx(100 * len(DEFAULT_CATALOG))

    def test_evaluator_defaults_to_default_catalog(self):
        assert ScenarioEvaluator().catalog is DEFAULT_CATALOG
