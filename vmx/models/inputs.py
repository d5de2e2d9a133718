"""Scenario inputs and the narrowing of loosely-typed external state.

Anything arriving from a request body, a saved preference blob or a form
field passes through here before it reaches the engine. Narrowing never
raises: malformed entries fall back to defaults.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from vmx.models.catalog import DEFAULT_CATALOG, CategoryCatalog
from vmx.models.enums import Band


@dataclass(frozen=True)
class Selection:
    """The band chosen for one category in one scenario."""

    category_id: str
    band: Band


def default_selections(
    catalog: CategoryCatalog = DEFAULT_CATALOG,
    band: Band = Band.MEDIUM,
) -> list[Selection]:
    """One selection per catalog category, all at the same band."""
    return [Selection(category_id=c.id, band=band) for c in catalog]


def _parse_band(value: Any) -> Optional[Band]:
    if isinstance(value, Band):
        return value
    if isinstance(value, str):
        try:
            return Band(value)
        except ValueError:
            return None
    return None


def _entry_category_id(entry: dict) -> Any:
    # Saved blobs from the browser client use camelCase keys
    if "category_id" in entry:
        return entry["category_id"]
    return entry.get("categoryId")


def normalize_selections(
    raw: Any,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
    fallback: Optional[list[Selection]] = None,
) -> list[Selection]:
    """Narrow raw selection state to exactly one Selection per category.

    Accepts either a mapping keyed by category id or a list of entries.
    Each entry must be a dict with a matching category id and a known band;
    categories without a well-formed entry keep their fallback band.
    """
    if fallback is None:
        fallback = default_selections(catalog)
    bands = {c.id: Band.MEDIUM for c in catalog}
    bands.update((s.category_id, s.band) for s in fallback if s.category_id in bands)

    if isinstance(raw, dict):
        candidates = dict(raw)
    elif isinstance(raw, (list, tuple)):
        candidates = {}
        for entry in raw:
            if isinstance(entry, Selection):
                candidates[entry.category_id] = {
                    "category_id": entry.category_id,
                    "band": entry.band,
                }
            elif isinstance(entry, dict):
                category_id = _entry_category_id(entry)
                if isinstance(category_id, str):
                    candidates[category_id] = entry
    else:
        return [Selection(category_id=c.id, band=bands[c.id]) for c in catalog]

    for category in catalog:
        entry = candidates.get(category.id)
        if not isinstance(entry, dict):
            continue
        if _entry_category_id(entry) != category.id:
            continue
        band = _parse_band(entry.get("band"))
        if band is not None:
            bands[category.id] = band

    return [Selection(category_id=c.id, band=bands[c.id]) for c in catalog]


def normalize_area(raw: Any, default: float) -> float:
    """Return raw as a positive finite float, else the default."""
    if isinstance(raw, bool):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value
