"""Error taxonomy for a fee calculation run.

Every error is fatal for the batch it occurs in; nothing is retried.
"""

from __future__ import annotations

from .reasons import ReasonCode


class FeeError(Exception):
    """Base class for all fee calculation failures."""


class ConfigurationError(FeeError, ValueError):
    """Invalid configuration or a currency code missing from the currency table."""


class InputUnavailableError(FeeError):
    """The operation source cannot be read; raised before any record is processed."""


class MalformedRecordError(FeeError, ValueError):
    """A record has the wrong arity or a field that cannot be parsed."""

    def __init__(self, reason: ReasonCode, *, line_no: int | None = None, detail: str = "") -> None:
        message = reason.value if not detail else f"{reason.value}: {detail}"
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.reason = reason
        self.line_no = line_no


class UnsupportedOperationTypeError(FeeError, ValueError):
    """The operation type is neither cash_in nor cash_out."""

    def __init__(self, operation_type: str, *, line_no: int | None = None) -> None:
        message = f"unsupported operation type {operation_type!r}"
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.operation_type = operation_type
        self.line_no = line_no
