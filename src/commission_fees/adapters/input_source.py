from __future__ import annotations

import csv
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from commission_fees.domain.errors import InputUnavailableError, MalformedRecordError
from commission_fees.domain.messages import RawRow
from commission_fees.domain.reasons import ReasonCode
from commission_fees.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class CsvInputSource(InputSource):
    # CSV operations file, one operation per physical line, no header.
    path: Path
    encoding: str = "utf-8"

    def rows(self) -> Iterator[RawRow]:
        try:
            handle = self.path.open("rb")
        except OSError as exc:
            raise InputUnavailableError(f"Cannot read input {self.path}: {exc.strerror or exc}") from exc

        with handle:
            # Lines are decoded one at a time so an undecodable byte is reported on its own line.
            for line_no, raw in enumerate(handle, start=1):
                try:
                    text = raw.decode(self.encoding)
                except UnicodeDecodeError as exc:
                    raise MalformedRecordError(
                        ReasonCode.INVALID_ENCODING,
                        line_no=line_no,
                        detail=f"not valid {self.encoding} at byte {exc.start}",
                    ) from exc

                fields = next(csv.reader([text]), [])
                # Blank lines carry no operation and are skipped without shifting numbering.
                if not fields or all(not cell.strip() for cell in fields):
                    continue
                yield RawRow(line_no=line_no, fields=tuple(fields))
