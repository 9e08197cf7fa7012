from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from commission_fees.domain.messages import IsoWeek, WeekKey
from commission_fees.ports.ledger import LedgerEntry, LedgerReadPort, LedgerWritePort


@dataclass
class InMemoryWeeklyLedger(LedgerReadPort, LedgerWritePort):
    # Run-scoped weekly ledger; buckets are created lazily and never evicted.
    _entries: dict[WeekKey, LedgerEntry] = field(default_factory=dict)

    @staticmethod
    def _key(user_id: int, week: IsoWeek) -> WeekKey:
        return WeekKey(user_id=user_id, iso_year=week.year, iso_week=week.week)

    def get(self, user_id: int, week: IsoWeek) -> LedgerEntry:
        return self._entries.get(self._key(user_id, week), LedgerEntry())

    def record(self, user_id: int, week: IsoWeek, amount_base: Decimal) -> None:
        if amount_base < 0:
            raise ValueError("Ledger amounts must be non-negative")
        key = self._key(user_id, week)
        current = self._entries.get(key, LedgerEntry())
        self._entries[key] = LedgerEntry(
            operation_count=current.operation_count + 1,
            total_amount_base=current.total_amount_base + amount_base,
        )

    def snapshot(self) -> dict[WeekKey, LedgerEntry]:
        # Entries are immutable, so a shallow copy is a full checkpoint.
        return dict(self._entries)

    def restore(self, snapshot: dict[WeekKey, LedgerEntry]) -> None:
        self._entries = dict(snapshot)

    def __len__(self) -> int:
        return len(self._entries)
