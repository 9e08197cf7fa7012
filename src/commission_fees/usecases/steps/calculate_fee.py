from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from commission_fees.config.models import UserTypeFees
from commission_fees.domain.errors import ConfigurationError, UnsupportedOperationTypeError
from commission_fees.domain.messages import OperationRecord, OperationType, UserType
from commission_fees.domain.money import percent_fee
from commission_fees.domain.reasons import FeeRule
from commission_fees.kernel.context import Context
from commission_fees.ports.ledger import LedgerReadPort
from commission_fees.services.currency_table import CurrencyTable
from commission_fees.usecases.messages import FeeDecision, KeyedOperation

_ZERO = Decimal(0)


@dataclass(frozen=True, slots=True)
class CalculateFee:
    """Prices one operation against the fee rules of its user type.

    Cash-in is a capped percentage. Cash-out is a percentage of whatever part of
    the operation exceeds the weekly free allowance, floored at a minimum fee.
    The ledger is only read here; UpdateLedger records the operation afterwards.
    Fees are left unrounded beyond hundredths; FormatOutput applies currency precision.
    """

    currencies: CurrencyTable
    rules: Mapping[UserType, UserTypeFees]
    ledger: LedgerReadPort

    def __call__(self, msg: KeyedOperation, ctx: Context | None) -> list[FeeDecision]:
        record = msg.record
        amount_base = self.currencies.to_base(record.amount, record.currency)

        if record.operation_type == OperationType.CASH_IN:
            fee, rule = self._cash_in(record)
        elif record.operation_type == OperationType.CASH_OUT:
            fee, rule = self._cash_out(msg, amount_base)
        else:
            raise UnsupportedOperationTypeError(str(record.operation_type), line_no=record.line_no)

        if ctx is not None:
            ctx.tag("fee_rule", rule.value)

        return [
            FeeDecision(
                line_no=record.line_no,
                user_id=record.user_id,
                week=msg.week,
                operation_type=record.operation_type,
                currency=record.currency,
                amount_base=amount_base,
                fee=fee,
                rule=rule,
            )
        ]

    def _rules_for(self, user_type: UserType) -> UserTypeFees:
        try:
            return self.rules[user_type]
        except KeyError:
            name = getattr(user_type, "value", user_type)
            raise ConfigurationError(f"No fee rules configured for user type {name!r}") from None

    def _cash_in(self, record: OperationRecord) -> tuple[Decimal, FeeRule]:
        rule = self._rules_for(record.user_type).cash_in
        raw_fee = percent_fee(record.amount, rule.percent)
        fee_base = self.currencies.to_base(raw_fee, record.currency)

        # Strict less-than: a fee exactly at the cap is replaced by the converted cap.
        if fee_base < rule.max_fee:
            return raw_fee, FeeRule.CASH_IN_PERCENT
        return self.currencies.from_base(rule.max_fee, record.currency), FeeRule.CASH_IN_CAPPED

    def _cash_out(self, msg: KeyedOperation, amount_base: Decimal) -> tuple[Decimal, FeeRule]:
        record = msg.record
        rule = self._rules_for(record.user_type).cash_out
        prior = self.ledger.get(record.user_id, msg.week)
        new_total_base = prior.total_amount_base + amount_base

        # Prior count is compared inclusively: the operation after the last free one is still priced.
        eligible = (
            prior.operation_count <= rule.weekly_free_operations
            and new_total_base > rule.weekly_free_amount
        )
        if not eligible:
            return _ZERO, FeeRule.CASH_OUT_FREE

        excess_base = new_total_base - rule.weekly_free_amount
        if excess_base >= amount_base:
            # Whole operation is chargeable; use the original amount to avoid a lossy round trip.
            chargeable = record.amount
        else:
            chargeable = self.currencies.from_base(excess_base, record.currency)

        raw_fee = percent_fee(chargeable, rule.percent)
        if self.currencies.to_base(raw_fee, record.currency) > rule.min_fee:
            return raw_fee, FeeRule.CASH_OUT_PERCENT
        return self.currencies.from_base(rule.min_fee, record.currency), FeeRule.CASH_OUT_MINIMUM
