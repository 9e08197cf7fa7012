from .errors import (
    ConfigurationError,
    FeeError,
    InputUnavailableError,
    MalformedRecordError,
    UnsupportedOperationTypeError,
)
from .messages import (
    Currency,
    IsoWeek,
    OperationRecord,
    OperationType,
    RawRow,
    UserType,
    WeekKey,
    week_key_of,
)
from .money import MoneyParseError, ceil_to_unit, format_fixed, parse_amount, percent_fee
from .reasons import FeeRule, ReasonCode

# Public domain exports keep imports explicit across layers.
__all__ = [
    "ConfigurationError",
    "Currency",
    "FeeError",
    "FeeRule",
    "InputUnavailableError",
    "IsoWeek",
    "MalformedRecordError",
    "MoneyParseError",
    "OperationRecord",
    "OperationType",
    "RawRow",
    "ReasonCode",
    "UnsupportedOperationTypeError",
    "UserType",
    "WeekKey",
    "ceil_to_unit",
    "format_fixed",
    "parse_amount",
    "percent_fee",
    "week_key_of",
]
