from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from commission_fees.kernel.scenario import Scenario, StepSpec
from commission_fees.kernel.step_registry import StepRegistry


class InvalidScenarioConfigError(ValueError):
    pass


class StepBuildError(RuntimeError):
    def __init__(self, step_name: str, cause: Exception) -> None:
        super().__init__(f"cannot build pipeline step '{step_name}': {cause}")
        self.step_name = step_name
        self.cause = cause


@dataclass(frozen=True, slots=True)
class ScenarioBuilder:
    """Turns the ``pipeline.steps`` declarations into an executable Scenario.

    Each declaration is ``{"name": ..., "config": {...}}``. Names are resolved
    through the registry and every factory receives the same wiring, so all
    steps of one engine share its ledger and currency table. A step may appear
    only once: running ``update_ledger`` twice would count each operation
    twice against the weekly allowance.
    """

    registry: StepRegistry

    def build(
        self,
        *,
        scenario_id: str,
        steps: Sequence[Mapping[str, Any]],
        wiring: dict[str, object],
    ) -> Scenario:
        if not steps:
            raise InvalidScenarioConfigError("pipeline.steps is empty")

        built_steps: list[StepSpec] = []
        seen: dict[str, int] = {}
        for idx, step_cfg in enumerate(steps):
            where = f"pipeline.steps[{idx}]"
            name = step_cfg.get("name")
            if not isinstance(name, str):
                raise InvalidScenarioConfigError(f"{where}.name must be a string")
            if name in seen:
                raise InvalidScenarioConfigError(
                    f"{where}: step '{name}' already declared at pipeline.steps[{seen[name]}]"
                )
            seen[name] = idx
            # UnknownStepError propagates unchanged so callers see the missing name.
            factory = self.registry.get(name)

            config = step_cfg.get("config") or {}
            if not isinstance(config, Mapping):
                raise InvalidScenarioConfigError(f"{where}.config must be a mapping")

            try:
                step = factory(dict(config), wiring)
            except Exception as exc:  # noqa: BLE001 - wrap with explicit error
                raise StepBuildError(name, exc) from exc

            built_steps.append(StepSpec(name=name, step=step))

        return Scenario(scenario_id=scenario_id, steps=tuple(built_steps))
