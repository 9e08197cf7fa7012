from __future__ import annotations

from dataclasses import dataclass

from commission_fees.domain.messages import OperationRecord, week_key_of
from commission_fees.usecases.messages import KeyedOperation


@dataclass(frozen=True, slots=True)
class ComputeWeekKey:
    # ISO-8601 week numbering, Monday start; 2014-12-31 belongs to 2015-W01.
    def __call__(self, msg: OperationRecord, ctx: object | None) -> list[KeyedOperation]:
        return [KeyedOperation(record=msg, week=week_key_of(msg.date))]
