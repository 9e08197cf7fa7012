from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

from commission_fees.domain.errors import (
    ConfigurationError,
    MalformedRecordError,
    UnsupportedOperationTypeError,
)
from commission_fees.domain.messages import Currency, OperationRecord, OperationType, RawRow, UserType
from commission_fees.domain.money import MoneyParseError, parse_amount
from commission_fees.domain.reasons import ReasonCode

_FIELD_COUNT = 6
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_USER_ID_PATTERN = re.compile(r"^\d+$")


class ParseOperationRecord:
    # Maps one CSV row to an OperationRecord; any defect aborts the batch.
    def __call__(self, msg: RawRow, ctx: object | None) -> list[OperationRecord]:
        fields = tuple(cell.strip() for cell in msg.fields)
        if len(fields) != _FIELD_COUNT:
            raise MalformedRecordError(
                ReasonCode.WRONG_ARITY,
                line_no=msg.line_no,
                detail=f"expected {_FIELD_COUNT} fields, got {len(fields)}",
            )

        raw_date, raw_user_id, raw_user_type, raw_operation, raw_amount, raw_currency = fields

        record = OperationRecord(
            date=_parse_date(raw_date, msg.line_no),
            user_id=_parse_user_id(raw_user_id, msg.line_no),
            user_type=_parse_user_type(raw_user_type, msg.line_no),
            operation_type=_parse_operation_type(raw_operation, msg.line_no),
            amount=_parse_amount(raw_amount, msg.line_no),
            currency=_parse_currency(raw_currency, msg.line_no),
            line_no=msg.line_no,
        )
        return [record]


def _parse_date(value: str, line_no: int) -> date:
    if not _DATE_PATTERN.match(value):
        raise MalformedRecordError(ReasonCode.INVALID_DATE, line_no=line_no, detail=repr(value))
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise MalformedRecordError(ReasonCode.INVALID_DATE, line_no=line_no, detail=repr(value)) from exc


def _parse_user_id(value: str, line_no: int) -> int:
    if not _USER_ID_PATTERN.match(value):
        raise MalformedRecordError(ReasonCode.INVALID_USER_ID, line_no=line_no, detail=repr(value))
    return int(value)


def _parse_user_type(value: str, line_no: int) -> UserType:
    try:
        return UserType(value)
    except ValueError as exc:
        raise MalformedRecordError(ReasonCode.INVALID_USER_TYPE, line_no=line_no, detail=repr(value)) from exc


def _parse_operation_type(value: str, line_no: int) -> OperationType:
    try:
        return OperationType(value)
    except ValueError as exc:
        raise UnsupportedOperationTypeError(value, line_no=line_no) from exc


def _parse_amount(value: str, line_no: int) -> Decimal:
    try:
        return parse_amount(value)
    except MoneyParseError as exc:
        raise MalformedRecordError(exc.reason, line_no=line_no, detail=repr(value)) from exc


def _parse_currency(value: str, line_no: int) -> Currency:
    # Currencies form a closed set; anything else has no rate and cannot be priced.
    try:
        return Currency(value)
    except ValueError as exc:
        raise ConfigurationError(f"line {line_no}: currency {value!r} is not configured") from exc
