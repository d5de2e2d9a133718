"""VMX cost matrix: scenario valuation and delta/heat comparison."""

__version__ = "0.1.0"
