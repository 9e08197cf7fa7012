from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from commission_fees.ports.output_sink import OutputSink


@dataclass
class FileOutputSink(OutputSink):
    """Writes one fee per line to ``path``.

    Nothing touches the filesystem until the first line arrives. With
    ``atomic_replace`` the lines go to a ``.partial`` sibling that is renamed
    over ``path`` on close, so readers never observe a half-written file.
    """

    path: Path
    atomic_replace: bool = False
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _failed: bool = field(default=False, init=False, repr=False)

    @property
    def staging_path(self) -> Path:
        if not self.atomic_replace:
            return self.path
        return self.path.with_name(self.path.name + ".partial")

    def write_fee(self, fee: str) -> None:
        if self._handle is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.staging_path.open("w", encoding="utf-8")
        try:
            self._handle.write(f"{fee}\n")
        except OSError:
            self._failed = True
            raise

    def close(self) -> None:
        # Idempotent; a sink that never wrote leaves any existing file alone.
        handle, self._handle = self._handle, None
        if handle is None:
            return
        handle.close()
        if not self.atomic_replace:
            return
        # A failed write never replaces the target; the staging file is dropped instead.
        if self._failed:
            self.staging_path.unlink(missing_ok=True)
        else:
            self.staging_path.replace(self.path)


@dataclass
class StreamOutputSink(OutputSink):
    # Writes fees to a text stream (stdout by default); the stream is not closed.
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def write_fee(self, fee: str) -> None:
        self.stream.write(f"{fee}\n")

    def close(self) -> None:
        self.stream.flush()
