from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from commission_fees.domain.messages import RawRow


# Operation sources hand over untyped rows; typing and validation happen in parse_operation_record.
@runtime_checkable
class InputSource(Protocol):
    def rows(self) -> Iterator[RawRow]:
        """Yield one RawRow per non-blank operation line, in file order, numbered by physical line.

        Raises InputUnavailableError if the source cannot be opened at all.
        """
        raise NotImplementedError("InputSource is a port; use a concrete adapter.")
