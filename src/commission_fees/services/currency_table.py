from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal

from commission_fees.config.models import CurrenciesConfig, CurrencyConfig
from commission_fees.domain.errors import ConfigurationError
from commission_fees.domain.messages import Currency
from commission_fees.domain.money import ceil_to_unit, format_fixed

# Converted amounts are kept to a billionth of a unit; digits below that are division residue.
_CONVERSION_SCALE = Decimal("1e-9")
_CONVERSION_CONTEXT = Context(prec=60)


@dataclass(frozen=True, slots=True)
class CurrencyTable:
    """Static conversion and precision rules keyed by currency.

    Rates are expressed as units of a currency per one unit of the base currency,
    so converting to base divides and converting from base multiplies. Base
    amounts keep full precision; amounts converted back into an operation
    currency are settled at a billionth of a unit, so a round trip through the
    base currency reproduces the original amount exactly.
    """

    base: Currency
    entries: Mapping[Currency, CurrencyConfig]

    @classmethod
    def from_config(cls, config: CurrenciesConfig) -> CurrencyTable:
        return cls(base=config.base, entries=dict(config.rates))

    def entry(self, currency: Currency) -> CurrencyConfig:
        try:
            return self.entries[currency]
        except KeyError:
            raise ConfigurationError(f"Currency {getattr(currency, 'value', currency)!r} is not configured") from None

    def to_base(self, amount: Decimal, currency: Currency) -> Decimal:
        return amount / self.entry(currency).rate

    def from_base(self, amount: Decimal, currency: Currency) -> Decimal:
        converted = amount * self.entry(currency).rate
        return converted.quantize(_CONVERSION_SCALE, rounding=ROUND_HALF_EVEN, context=_CONVERSION_CONTEXT)

    def round_up(self, amount: Decimal, currency: Currency) -> Decimal:
        """Ceil amount to the currency's smallest unit (cents for EUR, yen for JPY)."""
        return ceil_to_unit(amount, self.entry(currency).smallest_unit)

    def format(self, amount: Decimal, currency: Currency) -> str:
        """Round up to currency precision and render with its fixed number of decimals."""
        entry = self.entry(currency)
        return format_fixed(ceil_to_unit(amount, entry.smallest_unit), entry.decimal_places)
