from __future__ import annotations

from dataclasses import dataclass

from commission_fees.domain.messages import OperationType
from commission_fees.ports.ledger import LedgerWritePort
from commission_fees.usecases.messages import FeeDecision


@dataclass(frozen=True, slots=True)
class UpdateLedger:
    # Every cash-out is recorded, charged or free; cash-in never touches the ledger.
    ledger: LedgerWritePort

    def __call__(self, msg: FeeDecision, ctx: object | None) -> list[FeeDecision]:
        if msg.operation_type == OperationType.CASH_OUT:
            self.ledger.record(msg.user_id, msg.week, msg.amount_base)
        return [msg]
