from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from commission_fees.kernel.context import ContextFactory
from commission_fees.kernel.runner import Runner
from commission_fees.kernel.scenario import Scenario
from commission_fees.kernel.scenario_builder import ScenarioBuilder
from commission_fees.kernel.step_registry import StepRegistry
from commission_fees.ports.log_sink import LogSink


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # Small bundle for runner + scenario.
    runner: Runner
    scenario: Scenario


def build_runtime(
    *,
    scenario_id: str,
    steps: Sequence[Mapping[str, Any]],
    registry: StepRegistry,
    wiring: dict[str, object],
    run_id: str = "run",
    log_sink: LogSink | None = None,
) -> AppRuntime:
    scenario = ScenarioBuilder(registry).build(scenario_id=scenario_id, steps=steps, wiring=wiring)
    runner = Runner(
        scenario=scenario,
        context_factory=ContextFactory(run_id, scenario_id),
        log_sink=log_sink,
    )
    return AppRuntime(runner=runner, scenario=scenario)
