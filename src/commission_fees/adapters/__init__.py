from .input_source import CsvInputSource
from .ledger import InMemoryWeeklyLedger
from .log_sinks import JsonlLogSink, NullLogSink, StreamLogSink
from .output_sink import FileOutputSink, StreamOutputSink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "CsvInputSource",
    "FileOutputSink",
    "InMemoryWeeklyLedger",
    "JsonlLogSink",
    "NullLogSink",
    "StreamLogSink",
    "StreamOutputSink",
]
