"""Delta/heat comparison between two scenario results.

Rows are built per category of Scenario A, classified into heat levels by
their change relative to A's total, and ranked to pick the (at most three)
top drivers. Drivers are always picked from the full row set; the sort and
drivers-only views are applied afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from vmx.engine.errors import CategoryMismatchError
from vmx.engine.result import DeltaReport, DeltaRow, ScenarioResult
from vmx.models.compare import CompareConfig
from vmx.models.enums import Direction, HeatLevel, SortMode

logger = logging.getLogger(__name__)

TOP_N = 3


def classify_heat(
    impact_fraction: float,
    medium_threshold: float,
    high_threshold: float,
) -> HeatLevel:
    """Heat from the fractional impact alone (before the driver upgrade)."""
    if impact_fraction >= high_threshold:
        return HeatLevel.HIGH
    if impact_fraction >= medium_threshold:
        return HeatLevel.MEDIUM
    return HeatLevel.LOW


def _direction(delta_cost: float) -> Direction:
    if delta_cost > 0:
        return Direction.INCREASE
    if delta_cost < 0:
        return Direction.DECREASE
    return Direction.FLAT


def _by_magnitude(rows: list[DeltaRow]) -> list[DeltaRow]:
    # sorted() is stable with reverse=True, so ties keep catalog order
    return sorted(rows, key=lambda r: abs(r.delta_cost), reverse=True)


class DeltaAnalyzer:
    """Stateless comparison of Scenario B against Scenario A."""

    def compare(
        self,
        result_a: ScenarioResult,
        result_b: ScenarioResult,
        config: Optional[CompareConfig] = None,
    ) -> DeltaReport:
        if config is None:
            config = CompareConfig()
        medium = config.medium_threshold
        high = max(config.high_threshold, medium)

        self._check_categories(result_a, result_b)
        if result_a.currency != result_b.currency:
            logger.warning(
                "Comparing scenarios in different currencies (%s vs %s); "
                "no conversion applied",
                result_a.currency,
                result_b.currency,
            )

        total_a_floor = max(result_a.total_cost, 1.0)
        costs_b = {c.category_id: c for c in result_b.categories}

        # Catalog order, which is the order of A's categories
        base_rows: list[DeltaRow] = []
        for a in result_a.categories:
            b = costs_b[a.category_id]
            delta_cost = b.cost - a.cost
            impact = abs(delta_cost) / total_a_floor
            base_rows.append(
                DeltaRow(
                    category_id=a.category_id,
                    label=a.label,
                    delta_cost=delta_cost,
                    delta_pct=b.pct_of_total - a.pct_of_total,
                    impact_fraction=impact,
                    direction=_direction(delta_cost),
                    heat=classify_heat(impact, medium, high),
                )
            )

        drivers = _by_magnitude([r for r in base_rows if r.delta_cost != 0])[:TOP_N]
        driver_ids = {r.category_id for r in drivers}

        rows = [self._mark_driver(r, r.category_id in driver_ids) for r in base_rows]

        increases = sorted(
            (r for r in rows if r.delta_cost > 0),
            key=lambda r: r.delta_cost,
            reverse=True,
        )[:TOP_N]
        decreases = sorted(
            (r for r in rows if r.delta_cost < 0),
            key=lambda r: r.delta_cost,
        )[:TOP_N]

        view = _by_magnitude(rows) if config.sort_mode == SortMode.IMPACT else list(rows)
        if config.drivers_only:
            view = [r for r in view if r.is_top_driver]

        return DeltaReport(
            total_delta=result_b.total_cost - result_a.total_cost,
            rows=tuple(view),
            top_increases=tuple(increases),
            top_decreases=tuple(decreases),
            currency=result_a.currency,
            total_a=result_a.total_cost,
            total_b=result_b.total_cost,
        )

    @staticmethod
    def _mark_driver(row: DeltaRow, is_driver: bool) -> DeltaRow:
        """Flag a driver; a low-heat driver with real impact shows as medium."""
        if not is_driver:
            return row
        heat = row.heat
        if heat == HeatLevel.LOW and row.impact_fraction > 0:
            heat = HeatLevel.MEDIUM
        return replace(row, is_top_driver=True, heat=heat)

    @staticmethod
    def _check_categories(result_a: ScenarioResult, result_b: ScenarioResult) -> None:
        ids_a = [c.category_id for c in result_a.categories]
        ids_b = {c.category_id for c in result_b.categories}
        missing = [i for i in ids_a if i not in ids_b]
        unexpected = sorted(ids_b - set(ids_a))
        if missing or unexpected:
            raise CategoryMismatchError(missing=missing, unexpected=unexpected)


_default_analyzer = DeltaAnalyzer()


def compare(
    result_a: ScenarioResult,
    result_b: ScenarioResult,
    config: Optional[CompareConfig] = None,
) -> DeltaReport:
    """Compare two scenario results with the given (or default) config."""
    return _default_analyzer.compare(result_a, result_b, config)
