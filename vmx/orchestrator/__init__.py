from .comparison import ComparisonOutcome, run_comparison, run_scenario

__all__ = ["ComparisonOutcome", "run_comparison", "run_scenario"]
