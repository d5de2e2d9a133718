"""Shared test fixtures for the VMX test suite."""

import pytest

from vmx.benchmarks.schema import BenchmarkSet
from vmx.engine.evaluator import ScenarioEvaluator
from vmx.models.catalog import CategoryCatalog
from vmx.models.enums import Band
from vmx.models.inputs import Selection


def make_benchmark(medium_rates, currency="USD", low_factor=0.5, high_factor=2.0):
    """Helper to build a BenchmarkSet from MEDIUM rates, deriving LOW/HIGH."""
    return BenchmarkSet(
        currency=currency,
        rates={
            category_id: {
                Band.LOW: rate * low_factor,
                Band.MEDIUM: rate,
                Band.HIGH: rate * high_factor,
            }
            for category_id, rate in medium_rates.items()
        },
    )


def make_selections(catalog, band=Band.MEDIUM, **overrides):
    """One Selection per category; keyword overrides set individual bands."""
    return [
        Selection(category_id=c.id, band=overrides.get(c.id, band)) for c in catalog
    ]


@pytest.fixture
def xyz_catalog() -> CategoryCatalog:
    """Three-category catalog used by the worked comparison example."""
    return CategoryCatalog([("X", "Category X"), ("Y", "Category Y"), ("Z", "Category Z")])


@pytest.fixture
def xyz_evaluator(xyz_catalog) -> ScenarioEvaluator:
    return ScenarioEvaluator(xyz_catalog)


@pytest.fixture
def benchmark_a() -> BenchmarkSet:
    return make_benchmark({"X": 0.50, "Y": 1.00, "Z": 0.20})


@pytest.fixture
def benchmark_b() -> BenchmarkSet:
    return make_benchmark({"X": 0.60, "Y": 0.90, "Z": 0.20})


@pytest.fixture
def xyz_selections(xyz_catalog) -> list[Selection]:
    return make_selections(xyz_catalog)


@pytest.fixture
def result_a(xyz_evaluator, benchmark_a, xyz_selections):
    """Scenario A of the worked example: totals 1700 over 1000 units."""
    return xyz_evaluator.evaluate(1000, benchmark_a, xyz_selections)


@pytest.fixture
def result_b(xyz_evaluator, benchmark_b, xyz_selections):
    """Scenario B of the worked example: X up 100, Y down 100, Z flat."""
    return xyz_evaluator.evaluate(1000, benchmark_b, xyz_selections)
