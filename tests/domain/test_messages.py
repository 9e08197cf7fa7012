from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

# Domain messages: ISO week bucketing and record invariants.
from commission_fees.domain.messages import (
    Currency,
    IsoWeek,
    OperationRecord,
    OperationType,
    UserType,
    week_key_of,
)


def test_week_key_uses_iso_week_year_at_year_end() -> None:
    # 2014-12-31 is a Wednesday in the week that contains 2015-01-01 (a Thursday).
    assert week_key_of(date(2014, 12, 31)) == IsoWeek(year=2015, week=1)
    assert week_key_of(date(2015, 1, 1)) == IsoWeek(year=2015, week=1)


def test_week_key_uses_iso_week_year_at_year_start() -> None:
    # 2016-01-03 (Sunday) still belongs to 2015-W53.
    assert week_key_of(date(2016, 1, 3)) == IsoWeek(year=2015, week=53)
    assert week_key_of(date(2016, 1, 4)) == IsoWeek(year=2016, week=1)


def test_week_key_sunday_and_monday_split() -> None:
    # Weeks start on Monday, so Sunday closes the week.
    assert week_key_of(date(2016, 1, 10)) != week_key_of(date(2016, 1, 11))
    assert week_key_of(date(2016, 1, 4)) == week_key_of(date(2016, 1, 10))


def test_operation_record_rejects_negative_amount() -> None:
    # Amounts are non-negative by construction.
    with pytest.raises(ValueError):
        OperationRecord(
            date=date(2016, 1, 5),
            user_id=1,
            user_type=UserType.NATURAL,
            operation_type=OperationType.CASH_IN,
            amount=Decimal("-1"),
            currency=Currency.EUR,
        )


def test_operation_record_is_immutable() -> None:
    # Records are frozen once parsed; line_no defaults to 0 for programmatic records.
    record = OperationRecord(
        date=date(2016, 1, 5),
        user_id=1,
        user_type=UserType.NATURAL,
        operation_type=OperationType.CASH_IN,
        amount=Decimal("1"),
        currency=Currency.EUR,
    )
    with pytest.raises(AttributeError):
        record.amount = Decimal("2")  # type: ignore[misc]
    assert record.line_no == 0
