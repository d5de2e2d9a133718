"""Error boundary between the host and the scenario evaluator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from vmx.benchmarks.schema import RateTable
from vmx.engine.errors import EngineError
from vmx.engine.evaluator import ScenarioEvaluator
from vmx.engine.result import ScenarioResult
from vmx.models.inputs import Selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioOutcome:
    """Either a result or the message of the error that prevented one."""

    result: Optional[ScenarioResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def evaluate_safe(
    evaluator: ScenarioEvaluator,
    area_units: float,
    benchmark: RateTable,
    selections: Iterable[Selection],
) -> ScenarioOutcome:
    """Run an evaluation, turning engine errors into an explicit outcome.

    Only EngineError subclasses are converted; anything else is a bug and
    propagates.
    """
    try:
        result = evaluator.evaluate(area_units, benchmark, selections)
    except EngineError as e:
        logger.warning("Scenario evaluation failed: %s", e)
        return ScenarioOutcome(result=None, error=str(e))
    return ScenarioOutcome(result=result, error=None)
