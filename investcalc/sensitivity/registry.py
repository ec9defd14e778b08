from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional

from investcalc.models.enums import DeploymentType
from investcalc.models.scenario import InvestmentScenario

PerturbationFn = Callable[[InvestmentScenario, Decimal], InvestmentScenario]

# Global registry -- maps result key -> PerturbationDefinition, in registration order
_REGISTRY: dict[str, PerturbationDefinition] = {}


@dataclass(frozen=True)
class PerturbationDefinition:
    """A named change applied to a scenario before recalculating its ROI."""

    key: str
    label: str
    field_name: str  # InvestmentScenario field that is scaled
    applies_to: frozenset[DeploymentType]
    perturb_fn: PerturbationFn

    def applies(self, deployment_type: DeploymentType) -> bool:
        return deployment_type in self.applies_to


def register_perturbation(
    key: str,
    label: str,
    field_name: str,
    applies_to: tuple[DeploymentType, ...] = tuple(DeploymentType),
) -> Callable[[PerturbationFn], PerturbationFn]:
    """Decorator to register a scenario perturbation under a result key."""

    def decorator(fn: PerturbationFn) -> PerturbationFn:
        _REGISTRY[key] = PerturbationDefinition(
            key=key,
            label=label,
            field_name=field_name,
            applies_to=frozenset(applies_to),
            perturb_fn=fn,
        )
        return fn

    return decorator


def get_perturbation(key: str) -> Optional[PerturbationDefinition]:
    return _REGISTRY.get(key)


def get_all_perturbations() -> dict[str, PerturbationDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)


def perturbations_for(deployment_type: DeploymentType) -> list[PerturbationDefinition]:
    """Registered perturbations that apply to the given deployment type."""
    return [p for p in _REGISTRY.values() if p.applies(deployment_type)]
