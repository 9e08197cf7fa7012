from __future__ import annotations

from collections.abc import Iterable

from commission_fees.adapters.ledger import InMemoryWeeklyLedger
from commission_fees.config.models import AppConfig
from commission_fees.domain.messages import OperationRecord
from commission_fees.kernel.composition_root import build_runtime
from commission_fees.kernel.scenario import Scenario
from commission_fees.ports.log_sink import LogSink
from commission_fees.services.currency_table import CurrencyTable
from commission_fees.usecases.messages import OutputLine
from commission_fees.usecases.wiring import build_step_registry


class FeeEngine:
    """Computes one formatted fee per operation record, in input order.

    The engine owns its weekly ledger, so consecutive ``process`` calls on the
    same instance share weekly allowances. Use a fresh engine per independent
    run. Batches are all-or-nothing: if one aborts, the ledger is rolled back
    to its state before the batch and the engine stays usable.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        ledger: InMemoryWeeklyLedger | None = None,
        log_sink: LogSink | None = None,
        run_id: str = "run",
    ) -> None:
        self._config = config
        self._ledger = ledger if ledger is not None else InMemoryWeeklyLedger()
        self._currencies = CurrencyTable.from_config(config.currencies)
        wiring: dict[str, object] = {"ledger": self._ledger, "currency_table": self._currencies}
        runtime = build_runtime(
            scenario_id=config.scenario.name,
            steps=[step.model_dump() for step in config.pipeline.steps],
            registry=build_step_registry(config),
            wiring=wiring,
            run_id=run_id,
            log_sink=log_sink,
        )
        self._runner = runtime.runner
        self._scenario = runtime.scenario

    @property
    def ledger(self) -> InMemoryWeeklyLedger:
        return self._ledger

    @property
    def currencies(self) -> CurrencyTable:
        return self._currencies

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    def process(self, records: Iterable[OperationRecord]) -> list[str]:
        checkpoint = self._ledger.snapshot()
        try:
            outputs = self._runner.run(records)
        except Exception:
            self._ledger.restore(checkpoint)
            raise
        lines: list[str] = []
        for item in outputs:
            if not isinstance(item, OutputLine):
                raise TypeError(f"Scenario must end with format_output, got {type(item).__name__}")
            lines.append(item.text)
        return lines
