from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Currency(str, Enum):
    EUR = "EUR"
    USD = "USD"
    JPY = "JPY"


class UserType(str, Enum):
    NATURAL = "natural"
    LEGAL = "legal"


class OperationType(str, Enum):
    CASH_IN = "cash_in"
    CASH_OUT = "cash_out"


@dataclass(frozen=True, slots=True)
class RawRow:
    # RawRow keeps source order via line_no; fields are untrimmed CSV cells.
    line_no: int
    fields: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OperationRecord:
    # OperationRecord is immutable once parsed; line_no is diagnostic only.
    date: date
    user_id: int
    user_type: UserType
    operation_type: OperationType
    amount: Decimal
    currency: Currency
    line_no: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Operation amount must be non-negative")


@dataclass(frozen=True, slots=True, order=True)
class IsoWeek:
    # ISO-8601 week-numbering year and week; year-boundary weeks belong to the majority year.
    year: int
    week: int


@dataclass(frozen=True, slots=True)
class WeekKey:
    # Ledger address: one bucket per user and ISO week.
    user_id: int
    iso_year: int
    iso_week: int


def week_key_of(day: date) -> IsoWeek:
    iso = day.isocalendar()
    return IsoWeek(year=iso[0], week=iso[1])
