"""Immutable calculation result structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from investcalc.models.enums import DeploymentType


@dataclass(frozen=True)
class CalculationResult:
    """Top-level result of a single scenario calculation."""

    scenario_name: str
    deployment_type: DeploymentType
    tco: Decimal
    roi: Decimal  # percent
    payback_period: Decimal  # years, 0 when there is no annual benefit
    total_benefits: Decimal
    sensitivity: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class DeploymentComparison:
    """Side-by-side results for the local and cloud variants of a scenario."""

    local: CalculationResult
    cloud: CalculationResult

    @property
    def tco_difference(self) -> Decimal:
        """Cloud TCO minus local TCO. Negative means cloud is cheaper."""
        return self.cloud.tco - self.local.tco

    @property
    def roi_difference(self) -> Decimal:
        """Cloud ROI minus local ROI, in percentage points."""
        return self.cloud.roi - self.local.roi

    @property
    def lower_tco(self) -> DeploymentType:
        if self.cloud.tco < self.local.tco:
            return DeploymentType.CLOUD
        return DeploymentType.LOCAL

    @property
    def higher_roi(self) -> DeploymentType:
        if self.cloud.roi > self.local.roi:
            return DeploymentType.CLOUD
        return DeploymentType.LOCAL
