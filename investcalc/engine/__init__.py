"""Calculation engine: TCO, ROI, payback period and sensitivity."""

from .calculator import CalculationEngine
from .comparison import compare_deployments
from .result import CalculationResult, DeploymentComparison

__all__ = [
    "CalculationEngine",
    "CalculationResult",
    "DeploymentComparison",
    "compare_deployments",
]
