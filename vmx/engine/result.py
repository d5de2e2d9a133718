"""Immutable scenario and comparison result structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vmx.models.enums import Direction, HeatLevel


@dataclass(frozen=True)
class CategoryCost:
    """Cost of a single category within one scenario."""

    category_id: str
    label: str
    cost: float
    pct_of_total: float


@dataclass(frozen=True)
class ScenarioResult:
    """Cost breakdown for one scenario, categories in catalog order."""

    total_cost: float
    currency: str
    categories: tuple[CategoryCost, ...]

    def category(self, category_id: str) -> Optional[CategoryCost]:
        for entry in self.categories:
            if entry.category_id == category_id:
                return entry
        return None


@dataclass(frozen=True)
class DeltaRow:
    """Per-category change from Scenario A to Scenario B."""

    category_id: str
    label: str
    delta_cost: float  # B - A
    delta_pct: float  # share of B total minus share of A total
    impact_fraction: float  # |delta_cost| / max(A total, 1)
    direction: Direction
    heat: HeatLevel
    is_top_driver: bool = False


@dataclass(frozen=True)
class DeltaReport:
    """Top-level result of comparing two scenarios."""

    total_delta: float
    rows: tuple[DeltaRow, ...]
    top_increases: tuple[DeltaRow, ...]
    top_decreases: tuple[DeltaRow, ...]
    currency: str
    total_a: float
    total_b: float

    @property
    def drivers(self) -> tuple[DeltaRow, ...]:
        """Driver rows among those currently listed."""
        return tuple(r for r in self.rows if r.is_top_driver)
