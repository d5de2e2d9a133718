"""Pydantic model for the delta comparison configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

from vmx.models.enums import SortMode

if TYPE_CHECKING:
    from vmx.config.settings import Settings


class CompareConfig(BaseModel):
    """Thresholds and view options for comparing two scenarios.

    Thresholds are fractions of Scenario A's total cost (0.015 == 1.5%).
    A high threshold below the medium threshold is clamped up to it.
    """

    medium_threshold: float = Field(default=0.015, ge=0)
    high_threshold: float = Field(default=0.03, ge=0)
    sort_mode: SortMode = SortMode.IMPACT
    drivers_only: bool = False

    @model_validator(mode="after")
    def high_not_below_medium(self) -> CompareConfig:
        if self.high_threshold < self.medium_threshold:
            self.high_threshold = self.medium_threshold
        return self

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> CompareConfig:
        """Build a config from application defaults, then apply overrides."""
        values = {
            "medium_threshold": settings.delta_medium_threshold,
            "high_threshold": settings.delta_high_threshold,
            "sort_mode": settings.delta_sort_mode,
            "drivers_only": settings.delta_drivers_only,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
