from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from commission_fees.domain.messages import Currency, IsoWeek, OperationRecord, OperationType
from commission_fees.domain.reasons import FeeRule


@dataclass(frozen=True, slots=True)
class KeyedOperation:
    # Produced by ComputeWeekKey: the record plus its ISO week bucket.
    record: OperationRecord
    week: IsoWeek


@dataclass(frozen=True, slots=True)
class FeeDecision:
    # Produced by CalculateFee; carries what UpdateLedger and FormatOutput need.
    line_no: int
    user_id: int
    week: IsoWeek
    operation_type: OperationType
    currency: Currency
    amount_base: Decimal
    fee: Decimal
    rule: FeeRule


@dataclass(frozen=True, slots=True)
class OutputLine:
    # Produced by FormatOutput: the fee rendered at currency precision.
    line_no: int
    text: str
