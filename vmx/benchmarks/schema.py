"""Pydantic models for the region/tier benchmark library."""

from __future__ import annotations

import math
from typing import Optional, Protocol

from pydantic import BaseModel, Field, field_validator, model_validator

from vmx.models.enums import Band


class BenchmarkNotFoundError(LookupError):
    """No benchmark set exists for the requested region/tier."""


class RateTable(Protocol):
    """What the evaluator needs from a benchmark: a rate lookup and a currency."""

    currency: str

    def rate(self, category_id: str, band: Band) -> Optional[float]: ...


class BenchmarkSet(BaseModel):
    """Unit rates per (category, band) for one region/tier combination."""

    currency: str = Field(min_length=1, description="ISO currency code, copied verbatim")
    unit: str = Field(default="sqft", description="Area unit the rates apply to")
    rates: dict[str, dict[Band, float]] = Field(default_factory=dict)
    source: Optional[str] = Field(default=None, description="Citation for the rates")

    @field_validator("rates")
    @classmethod
    def rates_non_negative(
        cls, v: dict[str, dict[Band, float]]
    ) -> dict[str, dict[Band, float]]:
        for category_id, by_band in v.items():
            for band, rate in by_band.items():
                if not math.isfinite(rate) or rate < 0:
                    raise ValueError(
                        f"Rate for {category_id}/{band.value} must be a "
                        f"non-negative number, got {rate}"
                    )
        return v

    def rate(self, category_id: str, band: Band) -> Optional[float]:
        """Return the unit rate, or None if the table has no entry."""
        return self.rates.get(category_id, {}).get(band)


class Region(BaseModel):
    """A region with one benchmark set per tier."""

    id: str
    name: str
    by_tier: dict[str, BenchmarkSet] = Field(min_length=1)


class BenchmarkLibrary(BaseModel):
    """Read-only collection of regional benchmark sets."""

    version: str = "1"
    regions: list[Region] = Field(min_length=1)

    @model_validator(mode="after")
    def region_ids_unique(self) -> BenchmarkLibrary:
        ids = [r.id for r in self.regions]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate region ids: {duplicates}")
        return self

    @property
    def tiers(self) -> list[str]:
        """Tier ids across all regions, in first-seen order."""
        seen: list[str] = []
        for region in self.regions:
            for tier in region.by_tier:
                if tier not in seen:
                    seen.append(tier)
        return seen

    def region(self, region_id: str) -> Optional[Region]:
        for region in self.regions:
            if region.id == region_id:
                return region
        return None

    def get_benchmark(self, region_id: str, tier: str) -> BenchmarkSet:
        region = self.region(region_id)
        if region is None:
            raise BenchmarkNotFoundError(f"Unknown region: {region_id}")
        benchmark = region.by_tier.get(tier)
        if benchmark is None:
            raise BenchmarkNotFoundError(
                f"Region '{region_id}' has no benchmark for tier '{tier}'"
            )
        return benchmark

    def pick_second_region(self, primary_id: str) -> str:
        """Default Scenario B region: the first one that differs from A."""
        for region in self.regions:
            if region.id != primary_id:
                return region.id
        return primary_id
