from __future__ import annotations

from typing import Any

import pytest

# ScenarioBuilder assembles ordered steps from declarations and a registry.
from commission_fees.kernel.composition_root import build_runtime
from commission_fees.kernel.scenario_builder import InvalidScenarioConfigError, ScenarioBuilder, StepBuildError
from commission_fees.kernel.step_registry import StepRegistry, UnknownStepError


def _registry() -> StepRegistry:
    registry = StepRegistry()
    registry.register("add", lambda cfg, wiring: (lambda msg, ctx: [msg + cfg.get("by", 1)]))
    registry.register("scale", lambda cfg, wiring: (lambda msg, ctx: [msg * wiring["factor"]]))
    return registry


def test_build_preserves_declared_order() -> None:
    # Steps run in the order they are declared.
    scenario = ScenarioBuilder(_registry()).build(
        scenario_id="s",
        steps=[{"name": "scale"}, {"name": "add", "config": {"by": 5}}],
        wiring={"factor": 3},
    )
    assert scenario.step_names == ("scale", "add")
    value = 2
    for spec in scenario.steps:
        (value,) = spec.step(value, None)
    assert value == 11


def test_empty_steps_are_rejected() -> None:
    # A scenario needs at least one step.
    with pytest.raises(InvalidScenarioConfigError):
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[], wiring={})


def test_unknown_step_propagates() -> None:
    # Unknown names surface with the missing name.
    with pytest.raises(UnknownStepError) as exc:
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[{"name": "missing"}], wiring={})
    assert "missing" in str(exc.value)
    assert exc.value.known == ("add", "scale")
    assert str(exc.value) == "unknown pipeline step 'missing' (known: add, scale)"


def test_duplicate_step_is_rejected() -> None:
    # A step declared twice would run twice per record, so the pipeline is refused.
    duplicate = r"pipeline\.steps\[2\]: step 'add' already declared at pipeline\.steps\[0\]"
    with pytest.raises(InvalidScenarioConfigError, match=duplicate):
        ScenarioBuilder(_registry()).build(
            scenario_id="s",
            steps=[{"name": "add"}, {"name": "scale"}, {"name": "add", "config": {"by": 2}}],
            wiring={"factor": 2},
        )


def test_non_string_name_is_rejected() -> None:
    # Step names must be strings.
    with pytest.raises(InvalidScenarioConfigError):
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[{"name": 1}], wiring={})


def test_non_mapping_config_is_rejected() -> None:
    # Step config must be a mapping.
    with pytest.raises(InvalidScenarioConfigError):
        ScenarioBuilder(_registry()).build(
            scenario_id="s", steps=[{"name": "add", "config": ["by", 1]}], wiring={}
        )


def test_factory_failure_is_wrapped() -> None:
    # Missing wiring inside a factory surfaces as StepBuildError naming the step.
    registry = StepRegistry()

    def factory(cfg: dict[str, Any], wiring: dict[str, object]) -> Any:
        raise KeyError("ledger")

    registry.register("needs_ledger", factory)
    with pytest.raises(StepBuildError) as exc:
        ScenarioBuilder(registry).build(scenario_id="s", steps=[{"name": "needs_ledger"}], wiring={})
    assert exc.value.step_name == "needs_ledger"
    assert isinstance(exc.value.cause, KeyError)


def test_registry_later_registration_overrides() -> None:
    # Re-registering a name replaces the earlier factory.
    registry = _registry()
    registry.register("add", lambda cfg, wiring: (lambda msg, ctx: [msg - 1]))
    assert registry.names() == ["add", "scale"]
    step = registry.get("add")({}, {})
    assert list(step(5, None)) == [4]


def test_build_runtime_bundles_runner_and_scenario() -> None:
    # The composition root returns a runner bound to the built scenario.
    runtime = build_runtime(
        scenario_id="s",
        steps=[{"name": "add"}],
        registry=_registry(),
        wiring={},
        run_id="r",
    )
    assert runtime.scenario.step_names == ("add",)
    assert runtime.runner.run([1, 2]) == [2, 3]
