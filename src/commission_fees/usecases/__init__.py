from .engine import FeeEngine
from .messages import FeeDecision, KeyedOperation, OutputLine

__all__ = ["FeeDecision", "FeeEngine", "KeyedOperation", "OutputLine"]
