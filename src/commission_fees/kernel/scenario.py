from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from commission_fees.kernel.context import Context

Step = Callable[[object, Context | None], Iterable[object]]


# StepSpec binds a named step to a callable.
@dataclass(frozen=True, slots=True)
class StepSpec:
    name: str
    step: Step


@dataclass(frozen=True, slots=True)
class Scenario:
    # Scenario is an immutable ordered list of bound steps.
    scenario_id: str
    steps: Sequence[StepSpec]

    @property
    def step_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.steps)
