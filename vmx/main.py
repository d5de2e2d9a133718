"""FastAPI application for VMX: catalog, benchmarks, evaluate and compare."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from vmx import __version__
from vmx.benchmarks.loader import load_library
from vmx.benchmarks.schema import BenchmarkNotFoundError, BenchmarkSet
from vmx.config.settings import get_settings
from vmx.engine.evaluator import ScenarioEvaluator
from vmx.models.catalog import DEFAULT_CATALOG
from vmx.models.compare import CompareConfig
from vmx.models.enums import SortMode
from vmx.models.inputs import normalize_area, normalize_selections
from vmx.orchestrator.comparison import run_comparison, run_scenario

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="VMX Cost Matrix API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Read-only for the lifetime of the process
library = load_library(settings.benchmark_library_path)
evaluator = ScenarioEvaluator(DEFAULT_CATALOG)
logger.info(
    "Serving %d categories across %d benchmark regions",
    len(DEFAULT_CATALOG),
    len(library.regions),
)


class EvaluateRequest(BaseModel):
    region_id: str
    tier: Optional[str] = None
    area_units: Any = None
    selections: Any = None


class CompareRequest(BaseModel):
    region_a: str
    region_b: Optional[str] = None
    tier: Optional[str] = None
    area_units: Any = None
    selections_a: Any = None
    selections_b: Any = None
    medium_threshold: Optional[float] = Field(default=None, ge=0)
    high_threshold: Optional[float] = Field(default=None, ge=0)
    sort_mode: Optional[SortMode] = None
    drivers_only: Optional[bool] = None


@app.exception_handler(BenchmarkNotFoundError)
async def benchmark_not_found(request: Request, exc: BenchmarkNotFoundError):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/categories")
async def list_categories():
    """Return the category catalog in order."""
    return [
        {"id": c.id, "label": c.label, "order": c.order} for c in DEFAULT_CATALOG
    ]


@app.get("/api/benchmarks")
async def list_benchmarks():
    """Return available regions and tiers."""
    return {
        "regions": [
            {"id": r.id, "name": r.name, "tiers": list(r.by_tier)}
            for r in library.regions
        ],
        "tiers": library.tiers,
    }


@app.get("/api/benchmarks/{region_id}/{tier}", response_model=BenchmarkSet)
async def get_benchmark(region_id: str, tier: str):
    return library.get_benchmark(region_id, tier)


@app.post("/api/scenarios/evaluate")
async def evaluate_scenario(body: EvaluateRequest):
    """Value one scenario; errors come back as {"result": null, "error": ...}."""
    outcome = run_scenario(
        library,
        area_units=normalize_area(body.area_units, settings.default_area_units),
        region_id=body.region_id,
        tier=body.tier or settings.default_tier,
        selections=normalize_selections(body.selections, DEFAULT_CATALOG),
        evaluator=evaluator,
    )
    return outcome


@app.post("/api/scenarios/compare")
async def compare_scenarios(body: CompareRequest):
    """Value two scenarios and return their delta/heat report."""
    config = CompareConfig.from_settings(
        settings,
        medium_threshold=body.medium_threshold,
        high_threshold=body.high_threshold,
        sort_mode=body.sort_mode,
        drivers_only=body.drivers_only,
    )
    region_b = body.region_b or library.pick_second_region(body.region_a)
    outcome = run_comparison(
        library,
        area_units=normalize_area(body.area_units, settings.default_area_units),
        tier=body.tier or settings.default_tier,
        region_a=body.region_a,
        region_b=region_b,
        selections_a=normalize_selections(body.selections_a, DEFAULT_CATALOG),
        selections_b=normalize_selections(body.selections_b, DEFAULT_CATALOG),
        config=config,
        evaluator=evaluator,
    )
    return outcome


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vmx.main:app", host="127.0.0.1", port=8000)
