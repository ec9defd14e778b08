"""Domain types for investment scenarios."""

from .enums import DeploymentType
from .scenario import InvestmentScenario

__all__ = ["DeploymentType", "InvestmentScenario"]
