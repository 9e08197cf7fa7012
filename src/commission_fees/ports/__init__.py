from .input_source import InputSource
from .ledger import LedgerEntry, LedgerReadPort, LedgerWritePort
from .log_sink import LogSink
from .output_sink import OutputSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "InputSource",
    "LedgerEntry",
    "LedgerReadPort",
    "LedgerWritePort",
    "LogSink",
    "OutputSink",
]
