from .loader import get_default_library, load_library
from .schema import (
    BenchmarkLibrary,
    BenchmarkNotFoundError,
    BenchmarkSet,
    RateTable,
    Region,
)

__all__ = [
    "BenchmarkLibrary",
    "BenchmarkNotFoundError",
    "BenchmarkSet",
    "RateTable",
    "Region",
    "get_default_library",
    "load_library",
]
