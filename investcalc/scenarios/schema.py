"""Pydantic models for scenario input validation."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from investcalc.models.enums import DeploymentType
from investcalc.models.scenario import InvestmentScenario


class ScenarioConfig(BaseModel):
    """Raw scenario as supplied by a caller (JSON file, form, API payload).

    Costs of the deployment model that is not selected default to 0 so a
    local-only or cloud-only file stays valid.
    """

    name: str = Field(description="Display label")
    type: DeploymentType

    capex: Decimal = Field(default=Decimal(0), description="One-off hardware/licence cost (local)")
    annual_opex: Decimal = Field(default=Decimal(0), description="Yearly operating cost (local)")
    implementation: Decimal = Field(default=Decimal(0), description="One-off rollout cost (cloud)")
    annual_subscription: Decimal = Field(default=Decimal(0), description="Yearly subscription (cloud)")
    training: Decimal = Field(default=Decimal(0), description="One-off staff training cost")

    period: int = Field(description="Analysis period in years")

    annual_savings: Decimal
    annual_revenue_growth: Decimal

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Scenario name must not be blank")
        return v

    def to_scenario(self) -> InvestmentScenario:
        return InvestmentScenario(
            name=self.name,
            type=self.type,
            capex=self.capex,
            annual_opex=self.annual_opex,
            implementation=self.implementation,
            annual_subscription=self.annual_subscription,
            training=self.training,
            period=self.period,
            annual_savings=self.annual_savings,
            annual_revenue_growth=self.annual_revenue_growth,
        )
