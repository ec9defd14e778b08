"""Local vs cloud comparison of a single scenario."""

from __future__ import annotations

import logging
from typing import Optional

from investcalc.engine.calculator import CalculationEngine
from investcalc.engine.result import DeploymentComparison
from investcalc.models.enums import DeploymentType
from investcalc.models.scenario import InvestmentScenario

logger = logging.getLogger(__name__)


def compare_deployments(
    scenario: InvestmentScenario,
    engine: Optional[CalculationEngine] = None,
) -> DeploymentComparison:
    """Run the full calculation for both deployment models of ``scenario``.

    The scenario's own ``type`` is ignored; each side is calculated on a
    clone switched to that deployment type.
    """
    engine = engine or CalculationEngine()
    comparison = DeploymentComparison(
        local=engine.calculate_all(scenario.for_deployment(DeploymentType.LOCAL)),
        cloud=engine.calculate_all(scenario.for_deployment(DeploymentType.CLOUD)),
    )
    logger.info(
        f"Compared deployments for '{scenario.name}': "
        f"lower TCO={comparison.lower_tco.value}, "
        f"higher ROI={comparison.higher_roi.value}"
    )
    return comparison
