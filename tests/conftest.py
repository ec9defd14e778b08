"""Shared test fixtures for the InvestCalc test suite."""

from decimal import Decimal

import pytest

from investcalc.engine.calculator import CalculationEngine
from investcalc.models.enums import DeploymentType
from investcalc.models.scenario import InvestmentScenario


def make_scenario(**overrides) -> InvestmentScenario:
    """StylePoint reference values, with any field overridden."""
    values = dict(
        name="StylePoint clothing store",
        type=DeploymentType.LOCAL,
        capex=Decimal("3200000"),
        annual_opex=Decimal("1450000"),
        implementation=Decimal("850000"),
        annual_subscription=Decimal("1512000"),
        training=Decimal("400000"),
        period=5,
        annual_savings=Decimal("2800000"),
        annual_revenue_growth=Decimal("1500000"),
    )
    values.update(overrides)
    return InvestmentScenario(**values)


@pytest.fixture
def engine() -> CalculationEngine:
    return CalculationEngine()


@pytest.fixture
def local_scenario() -> InvestmentScenario:
    """Local deployment: capex 3.2M, opex 1.45M/yr, training 0.4M, 5 years."""
    return make_scenario()


@pytest.fixture
def cloud_scenario() -> InvestmentScenario:
    """Cloud deployment: implementation 0.85M, subscription 1.512M/yr."""
    return make_scenario(type=DeploymentType.CLOUD)


@pytest.fixture
def zero_cost_scenario() -> InvestmentScenario:
    return make_scenario(
        name="Free",
        capex=Decimal(0),
        annual_opex=Decimal(0),
        implementation=Decimal(0),
        annual_subscription=Decimal(0),
        training=Decimal(0),
    )
