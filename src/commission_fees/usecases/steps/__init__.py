from .calculate_fee import CalculateFee
from .compute_week_key import ComputeWeekKey
from .format_output import FormatOutput
from .parse_operation_record import ParseOperationRecord
from .update_ledger import UpdateLedger

__all__ = [
    "CalculateFee",
    "ComputeWeekKey",
    "FormatOutput",
    "ParseOperationRecord",
    "UpdateLedger",
]
