"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions, the currency registry and Money calculations
with exact decimal arithmetic.
"""

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.currency_registry import DEFAULT_CURRENCY_REGISTRY, CurrencyRegistry
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    InexactAmountError,
    InexactRoundingError,
    InvalidConversionError,
    InvalidScaleError,
    MalformedMoneyError,
    MoneyError,
    MoneyOverflowError,
    NullArgumentError,
    UnknownCurrencyError,
)
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode

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
