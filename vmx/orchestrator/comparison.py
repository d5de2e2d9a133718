"""Wire benchmark lookup, scenario evaluation and delta comparison together.

The host recomputes everything on each input change; nothing here is cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from vmx.benchmarks.schema import BenchmarkLibrary
from vmx.engine.boundary import ScenarioOutcome, evaluate_safe
from vmx.engine.delta import DeltaAnalyzer
from vmx.engine.evaluator import ScenarioEvaluator
from vmx.engine.result import DeltaReport
from vmx.models.compare import CompareConfig
from vmx.models.inputs import Selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonOutcome:
    scenario_a: ScenarioOutcome
    scenario_b: ScenarioOutcome
    delta: Optional[DeltaReport] = None


def run_scenario(
    library: BenchmarkLibrary,
    area_units: float,
    region_id: str,
    tier: str,
    selections: Iterable[Selection],
    evaluator: Optional[ScenarioEvaluator] = None,
) -> ScenarioOutcome:
    """Evaluate one scenario against a region/tier benchmark.

    Raises BenchmarkNotFoundError if the region/tier does not exist.
    """
    benchmark = library.get_benchmark(region_id, tier)
    return evaluate_safe(evaluator or ScenarioEvaluator(), area_units, benchmark, selections)


def run_comparison(
    library: BenchmarkLibrary,
    area_units: float,
    tier: str,
    region_a: str,
    region_b: str,
    selections_a: Iterable[Selection],
    selections_b: Iterable[Selection],
    config: Optional[CompareConfig] = None,
    evaluator: Optional[ScenarioEvaluator] = None,
) -> ComparisonOutcome:
    """Evaluate both scenarios and compare them if both succeeded."""
    evaluator = evaluator or ScenarioEvaluator()
    outcome_a = run_scenario(library, area_units, region_a, tier, selections_a, evaluator)
    outcome_b = run_scenario(library, area_units, region_b, tier, selections_b, evaluator)

    if not (outcome_a.ok and outcome_b.ok):
        logger.info(
            "Skipping comparison %s vs %s: scenario error", region_a, region_b
        )
        return ComparisonOutcome(scenario_a=outcome_a, scenario_b=outcome_b)

    report = DeltaAnalyzer().compare(outcome_a.result, outcome_b.result, config)
    return ComparisonOutcome(scenario_a=outcome_a, scenario_b=outcome_b, delta=report)
