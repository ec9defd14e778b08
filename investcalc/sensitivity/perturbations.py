"""±variation perturbations of the scenario drivers.

Each function clones the scenario and scales a single field; the original
scenario is left untouched. Registration order is the order keys appear in
the sensitivity map.

Cloud scenarios have no perturbation of ``implementation``: only the
recurring subscription is stressed on that side.
"""

from decimal import Decimal

from investcalc.models.enums import DeploymentType
from investcalc.models.scenario import InvestmentScenario
from investcalc.sensitivity.registry import register_perturbation


@register_perturbation(
    key="roi_low_savings",
    label="Savings -variation",
    field_name="annual_savings",
)
def low_savings(scenario: InvestmentScenario, variation: Decimal) -> InvestmentScenario:
    return scenario.clone(annual_savings=scenario.annual_savings * (1 - variation))


@register_perturbation(
    key="roi_high_savings",
    label="Savings +variation",
    field_name="annual_savings",
)
def high_savings(scenario: InvestmentScenario, variation: Decimal) -> InvestmentScenario:
    return scenario.clone(annual_savings=scenario.annual_savings * (1 + variation))


@register_perturbation(
    key="roi_low_revenue",
    label="Revenue growth -variation",
    field_name="annual_revenue_growth",
)
def low_revenue(scenario: InvestmentScenario, variation: Decimal) -> InvestmentScenario:
    return scenario.clone(
        annual_revenue_growth=scenario.annual_revenue_growth * (1 - variation)
    )


@register_perturbation(
    key="roi_high_revenue",
    label="Revenue growth +variation",
    field_name="annual_revenue_growth",
)
def high_revenue(scenario: InvestmentScenario, variation: Decimal) -> InvestmentScenario:
    return scenario.clone(
        annual_revenue_growth=scenario.annual_revenue_growth * (1 + variation)
    )


@register_perturbation(
    key="roi_high_opex",
    label="OPEX +variation",
    field_name="annual_opex",
    applies_to=(DeploymentType.LOCAL,),
)
def high_opex(scenario: InvestmentScenario, variation: Decimal) -> InvestmentScenario:
    return scenario.clone(annual_opex=scenario.annual_opex * (1 + variation))


@register_perturbation(
    key="roi_high_subscription",
    label="Subscription +variation",
    field_name="annual_subscription",
    applies_to=(DeploymentType.CLOUD,),
)
def high_subscription(
    scenario: InvestmentScenario,
    variation: Decimal,
) -> InvestmentScenario:
    return scenario.clone(
        annual_subscription=scenario.annual_subscription * (1 + variation)
    )


@register_perturbation(
    key="roi_high_capex",
    label="CAPEX +variation",
    field_name="capex",
    applies_to=(DeploymentType.LOCAL,),
)
def high_capex(scenario: InvestmentScenario, variation: Decimal) -> InvestmentScenario:
    return scenario.clone(capex=scenario.capex * (1 + variation))
