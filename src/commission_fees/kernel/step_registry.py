from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from commission_fees.kernel.scenario import Step


class UnknownStepError(KeyError):
    """A pipeline names a step that no factory was registered for."""

    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        super().__init__(name)
        self.name = name
        self.known = tuple(known)

    def __str__(self) -> str:
        known = ", ".join(self.known) or "none"
        return f"unknown pipeline step {self.name!r} (known: {known})"


# Factories receive the step's own config slice and the shared wiring (ledger, currency table).
StepFactory = Callable[[dict[str, Any], dict[str, object]], Step]


@dataclass
class StepRegistry:
    """Maps the step names allowed in ``pipeline.steps`` to their factories."""

    _factories: dict[str, StepFactory] = field(default_factory=dict)

    def register(self, name: str, factory: StepFactory) -> None:
        # Re-registering a name replaces its factory; tests swap in instrumented steps this way.
        self._factories[name] = factory

    def get(self, name: str) -> StepFactory:
        if name not in self._factories:
            raise UnknownStepError(name, self.names())
        return self._factories[name]

    def names(self) -> list[str]:
        return sorted(self._factories)
