from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from suite_money.config import MAX_INT32, MAX_INT64, MAX_INT128, MIN_INT32, MIN_INT64, MIN_INT128
from suite_money.domain.monetary.errors import MoneyOverflowError

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`).
# Binary `float` is not accepted; money arithmetic never passes through binary floating point.
DecimalLike: TypeAlias = Decimal | int | str


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal`.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a float, bool or another unsupported type.
        ValueError: If $value is not a finite decimal number.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"$value must be Decimal, int or str, but provided value is: {value!r} ({type(value).__name__})")
    else:
        try:
            result = Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"$value ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and infinities have no monetary meaning
    if not result.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result


def as_int(value: int, parameter: str) -> int:
    """Validate that $value is a plain integer (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"${parameter} must be an int, but provided value is: {value!r} ({type(value).__name__})")
    return value


def check_int64(value: int, what: str = "minor units") -> int:
    """Return $value if it fits into a signed 64-bit integer, otherwise raise `MoneyOverflowError`."""
    if value < MIN_INT64 or value > MAX_INT64:
        raise MoneyOverflowError(value, 64, what)
    return value


def check_int32(value: int, what: str = "minor units") -> int:
    """Return $value if it fits into a signed 32-bit integer, otherwise raise `MoneyOverflowError`."""
    if value < MIN_INT32 or value > MAX_INT32:
        raise MoneyOverflowError(value, 32, what)
    return value


def check_int128(value: int, what: str = "minor units") -> int:
    """Return $value if it fits into a signed 128-bit integer, otherwise raise `MoneyOverflowError`."""
    if value < MIN_INT128 or value > MAX_INT128:
        raise MoneyOverflowError(value, 128, what)
    return value


def check_magnitude(value: Decimal, decimal_places: int, bits: int = 64) -> Decimal:
    """Reject $value early if its minor units (at $decimal_places) have more digits than any signed $bits-bit integer.

    Only the exponent of $value is inspected, so no digits are built for huge values such as `1E+999999999`.
    Values passing this check must still be verified exactly (`check_int64`, `check_int128`) once rounded.

    Raises:
        MoneyOverflowError: If $value is certainly out of range.
    """
    if not value.is_zero() and value.adjusted() + decimal_places >= len(str(2 ** (bits - 1))):
        raise MoneyOverflowError(value, bits, f"major units at {decimal_places} decimal place(s)")
    return value
