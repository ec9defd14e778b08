"""Scenario input files: validation and loading."""

from .loader import get_reference_scenario, load_scenario
from .schema import ScenarioConfig

__all__ = ["ScenarioConfig", "get_reference_scenario", "load_scenario"]
