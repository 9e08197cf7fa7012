from __future__ import annotations

from enum import Enum


# Stable reason codes attached to MalformedRecordError.
class ReasonCode(str, Enum):
    WRONG_ARITY = "WRONG_ARITY"
    INVALID_DATE = "INVALID_DATE"
    INVALID_USER_ID = "INVALID_USER_ID"
    INVALID_USER_TYPE = "INVALID_USER_TYPE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_ENCODING = "INVALID_ENCODING"


# FeeRule names the branch that produced a fee; surfaced in debug logs.
class FeeRule(str, Enum):
    CASH_IN_PERCENT = "CASH_IN_PERCENT"
    CASH_IN_CAPPED = "CASH_IN_CAPPED"
    CASH_OUT_FREE = "CASH_OUT_FREE"
    CASH_OUT_PERCENT = "CASH_OUT_PERCENT"
    CASH_OUT_MINIMUM = "CASH_OUT_MINIMUM"
