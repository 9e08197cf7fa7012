from .loader import default_config_path, load_config, parse_config
from .models import AppConfig, CashInRule, CashOutRule, CurrenciesConfig, CurrencyConfig, UserTypeFees

# Config exports are intentionally small.
__all__ = [
    "AppConfig",
    "CashInRule",
    "CashOutRule",
    "CurrenciesConfig",
    "CurrencyConfig",
    "UserTypeFees",
    "default_config_path",
    "load_config",
    "parse_config",
]
