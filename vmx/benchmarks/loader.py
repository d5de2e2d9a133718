"""Load and validate the benchmark library from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from vmx.benchmarks.schema import BenchmarkLibrary

logger = logging.getLogger(__name__)

# Default directory for bundled benchmark libraries
_CONFIG_DIR = Path(__file__).parent / "configs"


def load_library(file_path: Path | None = None) -> BenchmarkLibrary:
    """Load and validate a benchmark library from a JSON file.

    If no path is provided, loads the bundled demo library.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / "demo_library.json"
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Benchmark library not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    library = BenchmarkLibrary.model_validate(raw)
    logger.info(
        "Loaded benchmark library %s: %d regions, tiers %s",
        file_path.name,
        len(library.regions),
        library.tiers,
    )
    return library


def get_default_library() -> BenchmarkLibrary:
    """Load the bundled demo benchmark library."""
    return load_library()
