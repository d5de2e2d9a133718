"""Errors raised by the scenario evaluator and delta analyzer."""

from __future__ import annotations

from typing import Optional

from vmx.models.enums import Band


class EngineError(Exception):
    """Base class for every error the engine raises."""


class ValidationError(EngineError, ValueError):
    """Malformed scenario input: bad area, incomplete or duplicate selections."""

    def __init__(self, message: str, category_id: Optional[str] = None):
        super().__init__(message)
        self.category_id = category_id


class MissingRateError(EngineError, LookupError):
    """The benchmark has no rate for a required (category, band) pair."""

    def __init__(self, category_id: str, band: Band):
        super().__init__(
            f"Missing benchmark rate for category '{category_id}' at band {band.value}"
        )
        self.category_id = category_id
        self.band = band


class CategoryMismatchError(EngineError):
    """Two results being compared do not share the same category set."""

    def __init__(self, missing: list[str], unexpected: list[str]):
        parts = []
        if missing:
            parts.append(f"missing in Scenario B: {missing}")
        if unexpected:
            parts.append(f"not in Scenario A: {unexpected}")
        super().__init__("Category mismatch between scenarios (" + "; ".join(parts) + ")")
        self.missing = missing
        self.unexpected = unexpected
