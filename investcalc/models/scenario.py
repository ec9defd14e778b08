from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from .enums import DeploymentType


@dataclass(frozen=True)
class InvestmentScenario:
    """Inputs for one TCO/ROI calculation.

    Both cost models live on the same scenario: ``capex`` and ``annual_opex``
    apply to local deployments, ``implementation`` and ``annual_subscription``
    to cloud ones. ``type`` selects which pair is used.
    """

    name: str
    type: DeploymentType

    # Local model
    capex: Decimal
    annual_opex: Decimal

    # Cloud model
    implementation: Decimal
    annual_subscription: Decimal

    # Shared
    training: Decimal
    period: int  # years

    # Expected benefits per year
    annual_savings: Decimal
    annual_revenue_growth: Decimal

    def __post_init__(self):
        # Accepts "local"/"cloud" strings; anything else raises ValueError.
        object.__setattr__(self, "type", DeploymentType(self.type))

    @property
    def annual_net_benefit(self) -> Decimal:
        return self.annual_savings + self.annual_revenue_growth

    def clone(self, **changes) -> InvestmentScenario:
        """Return an independent copy, optionally with some fields replaced."""
        return replace(self, **changes)

    def for_deployment(self, deployment_type: DeploymentType) -> InvestmentScenario:
        return self.clone(type=deployment_type)
