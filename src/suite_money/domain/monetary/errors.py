"""Exceptions raised by the monetary domain.

Every exception derives from `MoneyError` and from the closest built-in
exception, so callers can catch either the domain-specific type or the generic
Python one (`ValueError`, `ArithmeticError`, ...).
"""

from __future__ import annotations

from typing import Any


class MoneyError(Exception):
    """Base class of all monetary domain errors."""


class NullArgumentError(MoneyError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"${parameter} cannot be None")


class UnknownCurrencyError(MoneyError, ValueError):
    """Raised when a currency code is not found in the currency registry."""

    def __init__(self, code: Any, available: list[str] | None = None):
        self.code = code
        self.available = available

        message = f"Currency with $code '{code}' is not a known currency"
        if available is not None:
            message += f". Available currencies: {available}"

        super().__init__(message)


class MalformedMoneyError(MoneyError, ValueError):
    """Raised when text does not match the canonical 'CODE amount' form."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse Money from $text '{text}': {reason}")


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when an operation combines amounts in different currencies."""

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Currencies differ: {expected} and {actual}")


class InexactAmountError(MoneyError, ArithmeticError):
    """Raised when an amount has more precision than the currency allows and no rounding mode was given."""

    def __init__(self, amount: Any, decimal_places: int):
        self.amount = amount
        self.decimal_places = decimal_places
        super().__init__(f"$amount {amount} cannot be represented with {decimal_places} decimal place(s) without rounding")


class InexactRoundingError(MoneyError, ArithmeticError):
    """Raised when rounding mode UNNECESSARY is used but rounding would discard digits."""

    def __init__(self, value: Any, scale: int):
        self.value = value
        self.scale = scale
        super().__init__(f"Rounding {value} to scale {scale} is inexact, but rounding mode is UNNECESSARY")


class InvalidScaleError(MoneyError, ValueError):
    """Raised when a requested scale exceeds the precision of the currency."""

    def __init__(self, scale: int, decimal_places: int):
        self.scale = scale
        self.decimal_places = decimal_places
        super().__init__(f"$scale {scale} exceeds the currency decimal places {decimal_places}")


class InvalidConversionError(MoneyError, ValueError):
    """Raised when a currency conversion is requested with invalid inputs."""


class MoneyOverflowError(MoneyError, OverflowError):
    """Raised when a value does not fit into the supported integer range."""

    def __init__(self, value: Any, bits: int, what: str = "minor units"):
        self.value = value
        self.bits = bits
        self.what = what
        super().__init__(f"Value {value} in {what} does not fit into a signed {bits}-bit integer")
