from __future__ import annotations

from typing import Any

from commission_fees.config.models import AppConfig
from commission_fees.kernel.step_registry import StepRegistry
from commission_fees.usecases.steps import (
    CalculateFee,
    ComputeWeekKey,
    FormatOutput,
    ParseOperationRecord,
    UpdateLedger,
)


def build_step_registry(config: AppConfig) -> StepRegistry:
    # Factories pull shared collaborators ("ledger", "currency_table") from wiring.
    registry = StepRegistry()

    registry.register("parse_operation_record", lambda cfg, w: ParseOperationRecord())
    registry.register("compute_week_key", lambda cfg, w: ComputeWeekKey())
    registry.register(
        "calculate_fee",
        lambda cfg, w: CalculateFee(
            currencies=_require(w, "currency_table"),
            rules=config.fees,
            ledger=_require(w, "ledger"),
        ),
    )
    registry.register("update_ledger", lambda cfg, w: UpdateLedger(ledger=_require(w, "ledger")))
    registry.register("format_output", lambda cfg, w: FormatOutput(currencies=_require(w, "currency_table")))

    return registry


def _require(wiring: dict[str, object], key: str) -> Any:
    # Wiring must provide required collaborators; raise KeyError to fail fast.
    if key not in wiring:
        raise KeyError(f"Missing wiring dependency: {key}")
    return wiring[key]
