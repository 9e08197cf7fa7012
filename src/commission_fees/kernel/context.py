from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(slots=True)
class Context:
    # Per-record runtime metadata (not domain state); steps may tag it for diagnostics.
    trace_id: str
    run_id: str
    scenario_id: str
    line_no: int | None
    received_at: datetime
    tags: dict[str, str] = field(default_factory=dict)

    def tag(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Context.tag value must be str")
        self.tags[key] = value


@dataclass(frozen=True, slots=True)
class ContextFactory:
    # ContextFactory owns per-record Context creation.
    run_id: str
    scenario_id: str

    def new(self, *, line_no: int | None = None) -> Context:
        return Context(
            trace_id=uuid.uuid4().hex,
            run_id=self.run_id,
            scenario_id=self.scenario_id,
            line_no=line_no,
            received_at=datetime.now(tz=UTC),
        )
