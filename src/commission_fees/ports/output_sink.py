from __future__ import annotations

from typing import Protocol, runtime_checkable


# Fee sinks only ever receive a fully successful batch, one rendered fee per operation.
@runtime_checkable
class OutputSink(Protocol):
    def write_fee(self, fee: str) -> None:
        """Append one fee already rendered at its currency's precision."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Publish written fees; OSError here means the fees did not reach their destination."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
