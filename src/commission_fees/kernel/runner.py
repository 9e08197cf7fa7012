from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from commission_fees.kernel.context import ContextFactory
from commission_fees.kernel.scenario import Scenario
from commission_fees.observability.logging import LogMessage
from commission_fees.ports.log_sink import LogSink


@dataclass(frozen=True, slots=True)
class Runner:
    """Executes a Scenario over an ordered batch, one record at a time.

    Each record runs through every step before the next record starts, so state
    written by record n is visible to record n+1. Outputs are collected and only
    returned once the whole batch succeeds; the first exception aborts the batch
    and propagates to the caller with nothing returned.
    """

    scenario: Scenario
    context_factory: ContextFactory
    log_sink: LogSink | None = None

    def run(self, inputs: Iterable[object]) -> list[object]:
        results: list[object] = []
        processed = 0
        self._log("INFO", "batch_started", scenario=self.scenario.scenario_id, steps=list(self.scenario.step_names))

        for seq, raw in enumerate(inputs, start=1):
            line_no = getattr(raw, "line_no", None) or seq
            ctx = self.context_factory.new(line_no=line_no)
            work: list[object] = [raw]
            step_name = ""
            try:
                for step_spec in self.scenario.steps:
                    step_name = step_spec.name
                    next_work: list[object] = []
                    for msg in work:
                        next_work.extend(step_spec.step(msg, ctx))
                    work = next_work
                    if not work:
                        break
            except Exception as exc:
                self._log(
                    "ERROR",
                    "batch_aborted",
                    line_no=line_no,
                    step=step_name,
                    error=type(exc).__name__,
                    detail=str(exc),
                )
                raise

            processed += 1
            self._log("DEBUG", "record_processed", line_no=line_no, trace_id=ctx.trace_id, **ctx.tags)
            results.extend(work)

        self._log("INFO", "batch_completed", records=processed, outputs=len(results))
        return results

    def _log(self, level: str, message: str, **fields: object) -> None:
        if self.log_sink is None:
            return
        fields.setdefault("run_id", self.context_factory.run_id)
        self.log_sink.emit(LogMessage(level=level, message=message, fields=fields))
