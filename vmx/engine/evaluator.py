"""Scenario valuation engine.

Takes a floor area, a benchmark rate table and one band selection per
category -> produces a ScenarioResult with per-category cost and share of
total.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from vmx.benchmarks.schema import RateTable
from vmx.engine.errors import MissingRateError, ValidationError
from vmx.engine.result import CategoryCost, ScenarioResult
from vmx.models.catalog import DEFAULT_CATALOG, CategoryCatalog
from vmx.models.enums import Band
from vmx.models.inputs import Selection

logger = logging.getLogger(__name__)


class ScenarioEvaluator:
    """Stateless engine that values one scenario against a category catalog."""

    def __init__(self, catalog: CategoryCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def evaluate(
        self,
        area_units: float,
        benchmark: RateTable,
        selections: Iterable[Selection],
    ) -> ScenarioResult:
        """Value every catalog category at its selected band's rate."""
        area = self._check_area(area_units)
        bands = self._index_selections(selections)

        costs: list[tuple[str, str, float]] = []
        for category in self.catalog:
            band = bands[category.id]
            rate = benchmark.rate(category.id, band)
            if rate is None:
                raise MissingRateError(category.id, band)
            if not math.isfinite(rate) or rate < 0:
                raise ValidationError(
                    f"Benchmark rate for '{category.id}' at band {band.value} "
                    f"must be a non-negative number, got {rate}",
                    category_id=category.id,
                )
            cost = area * rate
            if not math.isfinite(cost):
                raise ValidationError(
                    f"Cost for '{category.id}' overflows: area {area} x rate {rate}",
                    category_id=category.id,
                )
            costs.append((category.id, category.label, cost))

        total = sum(cost for _, _, cost in costs)
        if not math.isfinite(total):
            raise ValidationError(f"Total cost overflows for area {area}")

        categories = tuple(
            CategoryCost(
                category_id=category_id,
                label=label,
                cost=cost,
                pct_of_total=cost / total if total > 0 else 0.0,
            )
            for category_id, label, cost in costs
        )

        logger.debug(
            "Evaluated %d categories over %s units: total %.2f %s",
            len(categories),
            area,
            total,
            benchmark.currency,
        )
        return ScenarioResult(
            total_cost=total,
            currency=benchmark.currency,
            categories=categories,
        )

    @staticmethod
    def _check_area(area_units: float) -> float:
        if isinstance(area_units, bool) or not isinstance(area_units, (int, float)):
            raise ValidationError(f"Area must be a number, got {area_units!r}")
        try:
            area = float(area_units)
        except OverflowError:
            raise ValidationError(
                "Area must be a finite number, got an oversized integer"
            ) from None
        if not math.isfinite(area) or area <= 0:
            raise ValidationError(f"Area must be greater than 0, got {area_units}")
        return area

    def _index_selections(self, selections: Iterable[Selection]) -> dict[str, Band]:
        """Map category id -> band, enforcing exactly one entry per category."""
        bands: dict[str, Band] = {}
        for selection in selections:
            category_id = selection.category_id
            if category_id not in self.catalog:
                raise ValidationError(
                    f"Unknown category in selections: {category_id}",
                    category_id=category_id,
                )
            if category_id in bands:
                raise ValidationError(
                    f"Duplicate selection for category: {category_id}",
                    category_id=category_id,
                )
            try:
                bands[category_id] = Band(selection.band)
            except ValueError:
                raise ValidationError(
                    f"Invalid band {selection.band!r} for category: {category_id}",
                    category_id=category_id,
                ) from None

        missing = [c.id for c in self.catalog if c.id not in bands]
        if missing:
            raise ValidationError(
                f"Missing selection for category: {missing[0]}"
                + (f" (and {len(missing) - 1} more)" if len(missing) > 1 else ""),
                category_id=missing[0],
            )
        return bands


_default_evaluator = ScenarioEvaluator()


def evaluate(
    area_units: float,
    benchmark: RateTable,
    selections: Iterable[Selection],
) -> ScenarioResult:
    """Evaluate a scenario against the default catalog."""
    return _default_evaluator.evaluate(area_units, benchmark, selections)
