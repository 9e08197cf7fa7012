from .currency_table import CurrencyTable

__all__ = ["CurrencyTable"]
