from __future__ import annotations

import re
from decimal import ROUND_CEILING, Decimal, InvalidOperation

from .reasons import ReasonCode


class MoneyParseError(ValueError):
    def __init__(self, reason: ReasonCode) -> None:
        super().__init__(reason.value)
        self.reason = reason


# Plain decimal notation only: digits with an optional fractional part, no sign or exponent.
_AMOUNT_PATTERN = re.compile(r"^\d+(?:\.\d+)?$")

_HUNDRED = Decimal(100)


def parse_amount(raw: str) -> Decimal:
    if not isinstance(raw, str):
        raise MoneyParseError(ReasonCode.INVALID_AMOUNT)

    text = raw.strip()
    if not _AMOUNT_PATTERN.match(text):
        raise MoneyParseError(ReasonCode.INVALID_AMOUNT)

    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise MoneyParseError(ReasonCode.INVALID_AMOUNT) from exc


def ceil_to_unit(amount: Decimal, denominator: int) -> Decimal:
    # Always rounds up to the next 1/denominator; fees favour the institution.
    units = (amount * denominator).to_integral_value(rounding=ROUND_CEILING)
    return units / Decimal(denominator)


def percent_fee(amount: Decimal, percent: Decimal) -> Decimal:
    # Percent is in percent units (0.3 means 0.3 %); result is ceiled to hundredths.
    return ceil_to_unit(amount * percent / _HUNDRED, 100)


def format_fixed(amount: Decimal, decimal_places: int) -> str:
    exponent = Decimal(1).scaleb(-decimal_places)
    return f"{amount.quantize(exponent, rounding=ROUND_CEILING):f}"
