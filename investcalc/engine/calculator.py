"""Core calculation engine.

Takes an investment scenario -> produces CalculationResult with TCO, ROI,
payback period and a sensitivity map.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional

# Ensure all perturbations are registered on import
import investcalc.sensitivity.perturbations  # noqa: F401
from investcalc.config.settings import Settings
from investcalc.engine.result import CalculationResult
from investcalc.models.enums import DeploymentType
from investcalc.models.scenario import InvestmentScenario
from investcalc.sensitivity.registry import perturbations_for

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


class CalculationEngine:
    """Stateless engine that runs TCO/ROI calculations."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._quantum = Decimal(1).scaleb(-self.settings.rounding_places)

    def calculate_all(self, scenario: InvestmentScenario) -> CalculationResult:
        """Run the full pipeline, sensitivity analysis included."""
        return self._calculate(scenario, with_sensitivity=True)

    def compute_tco(self, scenario: InvestmentScenario) -> Decimal:
        """Total cost of ownership over the analysis period."""
        if scenario.type == DeploymentType.LOCAL:
            # TCO_local = CAPEX + OPEX * period + training
            return (
                scenario.capex
                + scenario.annual_opex * scenario.period
                + scenario.training
            )
        # TCO_cloud = implementation + subscription * period + training
        return (
            scenario.implementation
            + scenario.annual_subscription * scenario.period
            + scenario.training
        )

    def compute_roi(
        self,
        scenario: InvestmentScenario,
        tco: Decimal,
    ) -> tuple[Decimal, Decimal]:
        """Return (total benefits, ROI %). ROI is 0 when TCO is 0."""
        benefits = scenario.annual_net_benefit * scenario.period
        if tco == 0:
            return benefits, _ZERO
        roi = (benefits - tco) / tco * _HUNDRED
        return benefits, self._round(roi)

    def compute_payback_period(
        self,
        scenario: InvestmentScenario,
        tco: Decimal,
    ) -> Decimal:
        """Years until benefits cover TCO; 0 when there is no annual benefit."""
        annual_net_benefit = scenario.annual_net_benefit
        if annual_net_benefit == 0:
            return _ZERO
        return self._round(tco / annual_net_benefit)

    def compute_sensitivity(self, scenario: InvestmentScenario) -> dict[str, Decimal]:
        """ROI under each registered perturbation that applies to the scenario."""
        variation = self.settings.sensitivity_variation
        sensitivity: dict[str, Decimal] = {}
        for perturbation in perturbations_for(scenario.type):
            perturbed = perturbation.perturb_fn(scenario, variation)
            # Nested runs stop here: their own sensitivity map stays empty.
            result = self._calculate(perturbed, with_sensitivity=False)
            sensitivity[perturbation.key] = result.roi
            logger.debug(
                f"Sensitivity {perturbation.label} ({perturbation.key}): "
                f"roi={result.roi}%"
            )
        return sensitivity

    def _calculate(
        self,
        scenario: InvestmentScenario,
        with_sensitivity: bool,
    ) -> CalculationResult:
        tco = self.compute_tco(scenario)
        benefits, roi = self.compute_roi(scenario, tco)
        payback = self.compute_payback_period(scenario, tco)
        sensitivity = self.compute_sensitivity(scenario) if with_sensitivity else {}

        logger.debug(
            f"{scenario.name} ({scenario.type.value}): tco={tco} roi={roi}% "
            f"payback={payback}y benefits={benefits}"
        )

        return CalculationResult(
            scenario_name=scenario.name,
            deployment_type=scenario.type,
            tco=tco,
            roi=roi,
            payback_period=payback,
            total_benefits=benefits,
            sensitivity=sensitivity,
        )

    def _round(self, value: Decimal) -> Decimal:
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus the decimals
            needed = value.adjusted() + 1 + self.settings.rounding_places
            ctx.prec = max(ctx.prec, needed)
            return value.quantize(self._quantum, rounding=ROUND_HALF_EVEN)
