"""Exact decimal arithmetic and rescaling under a rounding mode.

All functions work on `Decimal` values and never round implicitly: additions and
multiplications run in a context with maximum precision (so they are exact), and
every change of scale goes through `rescale` with an explicit `RoundingMode`.
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from enum import Enum

from suite_money.domain.monetary.errors import InexactRoundingError, NullArgumentError

# Template for exact add/subtract/multiply; operations run in a thread-local copy of it
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


class RoundingMode(Enum):
    """Policy choosing the result when a value does not land on the target scale.

    Values are the rounding constants of the `decimal` module, so `RoundingMode(decimal.ROUND_HALF_UP)`
    works. UNNECESSARY asserts that no rounding is needed and fails otherwise.
    """

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    UNNECESSARY = "ROUND_UNNECESSARY"

    @property
    def decimal_rounding(self) -> str:
        """Rounding constant passed to `decimal`; UNNECESSARY truncates and is checked afterwards."""
        if self is RoundingMode.UNNECESSARY:
            return ROUND_DOWN
        return self.value

    @classmethod
    def coerce(cls, rounding_mode: RoundingMode | str) -> RoundingMode:
        """Convert $rounding_mode into a `RoundingMode`.

        Args:
            rounding_mode: A `RoundingMode` or one of its values (e.g. `decimal.ROUND_FLOOR`).

        Returns:
            The matching `RoundingMode`.

        Raises:
            NullArgumentError: If $rounding_mode is None.
            ValueError: If $rounding_mode is a string that names no supported mode.
            TypeError: If $rounding_mode has an unsupported type.
        """
        if rounding_mode is None:
            raise NullArgumentError("rounding_mode")
        if isinstance(rounding_mode, RoundingMode):
            return rounding_mode
        if isinstance(rounding_mode, str):
            return cls(rounding_mode)
        raise TypeError(f"$rounding_mode must be a RoundingMode, but provided value is: {rounding_mode!r}")


def quantum(scale: int) -> Decimal:
    """Smallest step at $scale, i.e. `10 ** -scale` (scale 2 -> 0.01, scale -1 -> 1E+1)."""
    return Decimal((0, (1,), -scale))


def scale_of(value: Decimal) -> int:
    """Number of decimal places of $value as written, e.g. 2 for 2.34, 3 for 2.340 and -2 for 2E+2."""
    return -value.as_tuple().exponent


def is_representable(value: Decimal, scale: int) -> bool:
    """Check whether $value can be written with $scale decimal places without losing digits."""
    if value.as_tuple().exponent >= -scale:
        return True
    with localcontext(EXACT_CONTEXT) as context:
        return value.quantize(quantum(scale), rounding=ROUND_DOWN, context=context) == value


def rescale(value: Decimal, scale: int, rounding_mode: RoundingMode | str) -> Decimal:
    """Rescale $value to exactly $scale decimal places.

    Negative scales round to powers of ten: scale -1 rounds to the nearest 10.

    Args:
        value: Value to rescale.
        scale: Target number of decimal places.
        rounding_mode: Rounding policy used when digits must be discarded.

    Returns:
        Value whose exponent is `-scale`.

    Raises:
        InexactRoundingError: If $rounding_mode is UNNECESSARY and non-zero digits would be discarded.
    """
    mode = RoundingMode.coerce(rounding_mode)
    with localcontext(EXACT_CONTEXT) as context:
        result = value.quantize(quantum(scale), rounding=mode.decimal_rounding, context=context)

    # Raise: UNNECESSARY forbids losing information
    if mode is RoundingMode.UNNECESSARY and result != value:
        raise InexactRoundingError(value, scale)

    return result


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT) as context:
        return context.add(a, b)


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT) as context:
        return context.subtract(a, b)


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT) as context:
        return context.multiply(a, b)


def order_of_product(a: Decimal, b: Decimal) -> Decimal:
    """Power of ten not larger than `|a * b|` for non-zero $a and $b, found from the exponents alone."""
    return Decimal((0, (1,), a.adjusted() + b.adjusted()))


def order_of_quotient(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Power of ten not larger than `|dividend / divisor|` for non-zero operands, found from the exponents alone."""
    return Decimal((0, (1,), dividend.adjusted() - divisor.adjusted() - 1))


def divide(dividend: Decimal, divisor: Decimal, scale: int, rounding_mode: RoundingMode | str) -> Decimal:
    """Divide $dividend by $divisor and round the exact quotient to $scale decimal places.

    The quotient is first computed with two guard digits below the target scale using ROUND_05UP,
    which keeps the information whether any non-zero digits were cut off. Rounding that
    intermediate value with $rounding_mode gives the same result as rounding the exact quotient.

    Raises:
        ZeroDivisionError: If $divisor is zero.
        InexactRoundingError: If $rounding_mode is UNNECESSARY and the quotient needs rounding.
    """
    mode = RoundingMode.coerce(rounding_mode)

    # Raise: division by zero has no result
    if divisor.is_zero():
        raise ZeroDivisionError(f"Cannot divide {dividend} by zero")

    if dividend.is_zero():
        return Decimal((0, (0,), -scale))

    # Leading digit of the quotient is at most at position `dividend.adjusted() - divisor.adjusted()`
    precision = max(1, dividend.adjusted() - divisor.adjusted() + scale + 3)
    context = Context(
        prec=precision,
        rounding=ROUND_05UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )
    quotient = context.divide(dividend, divisor)
    return rescale(quotient, scale, mode)


def to_minor_units(amount: Decimal, decimal_places: int) -> int:
    """Convert $amount into an integer count of minor units (truncating any finer digits)."""
    with localcontext(EXACT_CONTEXT) as context:
        return int(amount.scaleb(decimal_places, context=context))


def from_minor_units(minor_units: int, decimal_places: int) -> Decimal:
    """Convert an integer count of minor units into a Decimal with $decimal_places decimal places."""
    with localcontext(EXACT_CONTEXT) as context:
        return Decimal(minor_units).scaleb(-decimal_places, context=context)
