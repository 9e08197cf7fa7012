from __future__ import annotations

import json
import sys
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import TextIO

from commission_fees.observability.logging import LogMessage, log_to_dict
from commission_fees.ports.log_sink import LogSink


class StreamLogSink(LogSink):
    # One JSON object per line on a text stream; stderr keeps stdout free for fees.
    def __init__(self, stream: TextIO | None = None, *, min_level: str = "INFO") -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._min_level = min_level

    def emit(self, message: LogMessage) -> None:
        if not message.enabled_for(self._min_level):
            return
        self._stream.write(_render(message) + "\n")

    def close(self) -> None:
        self._stream.flush()


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends so repeated runs share one file.
    def __init__(self, path: Path, *, min_level: str = "INFO") -> None:
        self._path = path
        self._min_level = min_level
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if not message.enabled_for(self._min_level):
            return
        self._file.write(_render(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        pass

    def close(self) -> None:
        pass


def _render(message: LogMessage) -> str:
    return json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _json_default(obj: object) -> str:
    # Decimal and dates are rendered as strings to keep amounts exact.
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return str(obj.value)
    if isinstance(obj, Decimal):
        return str(obj)
    return str(obj)
