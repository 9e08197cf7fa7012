from __future__ import annotations

from decimal import Decimal

import pytest

# Weekly ledger keeps per-user cash-out counts and base-currency totals.
from commission_fees.adapters.ledger import InMemoryWeeklyLedger
from commission_fees.domain.messages import IsoWeek
from commission_fees.ports.ledger import LedgerEntry, LedgerReadPort, LedgerWritePort


def test_unknown_bucket_reads_as_zero() -> None:
    # Absent user/week buckets behave as if nothing was recorded.
    ledger = InMemoryWeeklyLedger()
    entry = ledger.get(1, IsoWeek(2016, 1))
    assert entry == LedgerEntry()
    assert entry.operation_count == 0
    assert entry.total_amount_base == Decimal(0)
    assert len(ledger) == 0


def test_record_accumulates_count_and_total() -> None:
    # Each record call counts one operation and adds its amount.
    ledger = InMemoryWeeklyLedger()
    week = IsoWeek(2016, 1)
    ledger.record(1, week, Decimal("200"))
    ledger.record(1, week, Decimal("0"))
    ledger.record(1, week, Decimal("86.97"))
    assert ledger.get(1, week) == LedgerEntry(operation_count=3, total_amount_base=Decimal("286.97"))


def test_buckets_are_isolated_by_user_and_week() -> None:
    # Different users and different ISO weeks never share state.
    ledger = InMemoryWeeklyLedger()
    ledger.record(1, IsoWeek(2016, 1), Decimal("100"))
    ledger.record(2, IsoWeek(2016, 1), Decimal("50"))
    ledger.record(1, IsoWeek(2016, 2), Decimal("10"))
    assert ledger.get(1, IsoWeek(2016, 1)).total_amount_base == Decimal("100")
    assert ledger.get(2, IsoWeek(2016, 1)).total_amount_base == Decimal("50")
    assert ledger.get(1, IsoWeek(2016, 2)).total_amount_base == Decimal("10")
    assert ledger.get(1, IsoWeek(2015, 1)).operation_count == 0
    assert len(ledger) == 3


def test_same_week_number_in_different_years_is_distinct() -> None:
    # The bucket key includes the ISO year, not just the week number.
    ledger = InMemoryWeeklyLedger()
    ledger.record(1, IsoWeek(2015, 1), Decimal("100"))
    assert ledger.get(1, IsoWeek(2016, 1)).operation_count == 0


def test_negative_amount_is_rejected() -> None:
    # Totals are monotonically non-decreasing.
    ledger = InMemoryWeeklyLedger()
    with pytest.raises(ValueError):
        ledger.record(1, IsoWeek(2016, 1), Decimal("-1"))
    assert len(ledger) == 0


def test_ledger_satisfies_ports() -> None:
    # The adapter implements both read and write sides of the ledger contract.
    ledger = InMemoryWeeklyLedger()
    assert isinstance(ledger, LedgerReadPort)
    assert isinstance(ledger, LedgerWritePort)


def test_restore_returns_to_snapshot() -> None:
    # Buckets touched or created after a snapshot are reverted by restore.
    ledger = InMemoryWeeklyLedger()
    week = IsoWeek(2016, 1)
    ledger.record(1, week, Decimal("100"))
    checkpoint = ledger.snapshot()
    ledger.record(1, week, Decimal("50"))
    ledger.record(2, week, Decimal("10"))
    ledger.restore(checkpoint)
    assert ledger.get(1, week) == LedgerEntry(operation_count=1, total_amount_base=Decimal("100"))
    assert ledger.get(2, week) == LedgerEntry()
    assert len(ledger) == 1


def test_snapshot_is_independent_of_later_records() -> None:
    # Recording after a snapshot does not change the snapshot itself.
    ledger = InMemoryWeeklyLedger()
    checkpoint = ledger.snapshot()
    ledger.record(1, IsoWeek(2016, 1), Decimal("5"))
    assert checkpoint == {}
