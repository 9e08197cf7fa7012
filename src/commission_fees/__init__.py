from .config import AppConfig, default_config_path, load_config
from .domain import Currency, OperationRecord, OperationType, UserType
from .usecases import FeeEngine

__all__ = [
    "AppConfig",
    "Currency",
    "FeeEngine",
    "OperationRecord",
    "OperationType",
    "UserType",
    "default_config_path",
    "load_config",
]

__version__ = "0.1.0"
