from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, runtime_checkable

from commission_fees.domain.messages import IsoWeek


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    # Cash-out activity of one user in one ISO week; absent buckets read as zero.
    operation_count: int = 0
    total_amount_base: Decimal = Decimal(0)


# Ledger ports isolate per-user weekly state from fee rules.
@runtime_checkable
class LedgerReadPort(Protocol):
    def get(self, user_id: int, week: IsoWeek) -> LedgerEntry:
        """Return the entry for user/week, or a zero-valued entry."""
        raise NotImplementedError("LedgerReadPort is a port; use a concrete adapter.")


@runtime_checkable
class LedgerWritePort(Protocol):
    def record(self, user_id: int, week: IsoWeek, amount_base: Decimal) -> None:
        """Count one operation and add its base-currency amount to user/week."""
        raise NotImplementedError("LedgerWritePort is a port; use a concrete adapter.")
