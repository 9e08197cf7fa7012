from __future__ import annotations

from dataclasses import dataclass

from commission_fees.services.currency_table import CurrencyTable
from commission_fees.usecases.messages import FeeDecision, OutputLine


@dataclass(frozen=True, slots=True)
class FormatOutput:
    # Second rounding pass: ceil to the currency's smallest unit, fixed decimals.
    currencies: CurrencyTable

    def __call__(self, msg: FeeDecision, ctx: object | None) -> list[OutputLine]:
        return [OutputLine(line_no=msg.line_no, text=self.currencies.format(msg.fee, msg.currency))]
