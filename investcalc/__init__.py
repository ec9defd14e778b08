"""TCO, ROI, payback and sensitivity calculations for local vs cloud deployments."""

from .engine.calculator import CalculationEngine
from .engine.comparison import compare_deployments
from .engine.result import CalculationResult, DeploymentComparison
from .models.enums import DeploymentType
from .models.scenario import InvestmentScenario
from .scenarios.loader import get_reference_scenario, load_scenario

__all__ = [
    "CalculationEngine",
    "CalculationResult",
    "DeploymentComparison",
    "DeploymentType",
    "InvestmentScenario",
    "compare_deployments",
    "get_reference_scenario",
    "load_scenario",
]
