__version__ = "0.0.1"

from suite_money.domain.monetary import (
    DEFAULT_CURRENCY_REGISTRY,
    Currency,
    CurrencyMismatchError,
    CurrencyRegistry,
    CurrencyType,
    InexactAmountError,
    InexactRoundingError,
    InvalidConversionError,
    InvalidScaleError,
    MalformedMoneyError,
    Money,
    MoneyError,
    MoneyOverflowError,
    NullArgumentError,
    RoundingMode,
    UnknownCurrencyError,
)

__all__ = [
    "Currency",
    "CurrencyType",
    "CurrencyRegistry",
    "DEFAULT_CURRENCY_REGISTRY",
    "Money",
    "RoundingMode",
    "MoneyError",
    "NullArgumentError",
    "UnknownCurrencyError",
    "MalformedMoneyError",
    "CurrencyMismatchError",
    "InexactAmountError",
    "InexactRoundingError",
    "InvalidScaleError",
    "InvalidConversionError",
    "MoneyOverflowError",
]
