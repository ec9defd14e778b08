"""Load and validate investment scenarios from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from investcalc.models.scenario import InvestmentScenario
from investcalc.scenarios.schema import ScenarioConfig

logger = logging.getLogger(__name__)

# Default directory for bundled scenario files
_CONFIG_DIR = Path(__file__).parent / "configs"


def load_scenario_config(file_path: Path | None = None) -> ScenarioConfig:
    """Load and validate a scenario file.

    If no path is provided, loads the bundled reference scenario.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / "stylepoint_retail.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    config = ScenarioConfig.model_validate(raw)
    logger.info(f"Loaded scenario '{config.name}' ({config.type.value}) from {file_path}")
    return config


def load_scenario(file_path: Path | None = None) -> InvestmentScenario:
    return load_scenario_config(file_path).to_scenario()


def get_reference_scenario() -> InvestmentScenario:
    """The bundled StylePoint clothing store scenario (local deployment)."""
    return load_scenario()
