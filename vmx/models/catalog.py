"""The fixed catalog of facility cost categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Category:
    """A single cost dimension in the shared catalog."""

    id: str
    label: str
    order: int


class CategoryCatalog:
    """Ordered, immutable set of categories shared by every scenario."""

    def __init__(self, entries: list[tuple[str, str]]):
        seen: set[str] = set()
        categories: list[Category] = []
        for position, (category_id, label) in enumerate(entries):
            if category_id in seen:
                raise ValueError(f"Duplicate category id in catalog: {category_id}")
            seen.add(category_id)
            categories.append(Category(id=category_id, label=label, order=position))
        if not categories:
            raise ValueError("Category catalog must not be empty")
        self._categories = tuple(categories)
        self._by_id = {c.id: c for c in self._categories}

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def ids(self) -> list[str]:
        return [c.id for c in self._categories]

    def get(self, category_id: str) -> Optional[Category]:
        """Look up a category by ID."""
        return self._by_id.get(category_id)


DEFAULT_CATALOG = CategoryCatalog(
    [
        ("energy", "Energy & Utilities"),
        ("hvac", "HVAC Maintenance"),
        ("janitorial", "Janitorial & Cleaning"),
        ("security", "Security Services"),
        ("repairs", "Repairs & Upkeep"),
        ("grounds", "Grounds & Landscaping"),
        ("waste", "Waste & Recycling"),
        ("insurance", "Property Insurance"),
    ]
)
