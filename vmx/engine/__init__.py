from .boundary import ScenarioOutcome, evaluate_safe
from .delta import DeltaAnalyzer, classify_heat, compare
from .errors import CategoryMismatchError, EngineError, MissingRateError, ValidationError
from .evaluator import ScenarioEvaluator, evaluate
from .result import CategoryCost, DeltaReport, DeltaRow, ScenarioResult

__all__ = [
    "CategoryCost",
    "CategoryMismatchError",
    "DeltaAnalyzer",
    "DeltaReport",
    "DeltaRow",
    "EngineError",
    "MissingRateError",
    "ScenarioEvaluator",
    "ScenarioOutcome",
    "ScenarioResult",
    "ValidationError",
    "classify_heat",
    "compare",
    "evaluate",
    "evaluate_safe",
]
