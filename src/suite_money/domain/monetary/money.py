from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import DEFAULT_CURRENCY_REGISTRY, CurrencyRegistry
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    InexactAmountError,
    InvalidConversionError,
    InvalidScaleError,
    MalformedMoneyError,
    NullArgumentError,
)
from suite_money.domain.monetary.rounding import (
    RoundingMode,
    divide,
    exact_add,
    exact_multiply,
    exact_subtract,
    from_minor_units,
    is_representable,
    order_of_product,
    order_of_quotient,
    rescale,
    scale_of,
    to_minor_units,
)
from suite_money.utils.numeric_tools import (
    DecimalLike,
    as_decimal,
    as_int,
    check_int32,
    check_int64,
    check_int128,
    check_magnitude,
)

CurrencyLike = Currency | str

# Amount part of the canonical text form, e.g. "-5.78"
_AMOUNT_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

# "GBP 0" is the shortest valid text
_MIN_TEXT_LENGTH = 5

# Minor units of a factory-made amount have fewer than 40 digits (128 bits), so rounding
# steps of 10**40 minor units or coarser all give the same result
_MAX_ROUNDING_DIGITS = 40


def _resolve_currency(currency: CurrencyLike, registry: CurrencyRegistry | None, parameter: str = "currency") -> Currency:
    """Return $currency as `Currency`, looking codes up in $registry (default registry if None)."""
    if currency is None:
        raise NullArgumentError(parameter)
    if isinstance(currency, Currency):
        return currency
    if isinstance(currency, str):
        registry = registry if registry is not None else DEFAULT_CURRENCY_REGISTRY
        return registry.get(currency)
    raise TypeError(f"${parameter} must be a Currency or a currency code, but provided value is: {currency!r}")


class Money:
    """Immutable amount of money in a single currency.

    The amount is an exact `Decimal` whose scale always equals the decimal places of
    the currency (`GBP 2.34`, `JPY 423`). Arithmetic never rounds silently: operations
    that would lose precision need a `RoundingMode`, and every arithmetic result must
    fit into a signed 64-bit count of minor units, otherwise `MoneyOverflowError` is raised.

    Operations that do not change the value return the receiver itself.

    Create instances with the factories `of`, `of_major`, `of_minor`, `zero` and `parse`.
    """

    __slots__ = ("_currency", "_amount")

    def __init__(self, currency: Currency, amount: Decimal):
        """Initialize Money from a currency and an amount already at the currency scale.

        Prefer the factories; this constructor does no rounding.

        Args:
            currency (Currency): Currency of the amount.
            amount (Decimal): Amount with exactly `currency.decimal_places` decimal places.

        Raises:
            TypeError: If $currency is not a Currency or $amount is not a Decimal.
            ValueError: If $amount is not finite or not at the currency scale.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        if not isinstance(amount, Decimal):
            raise TypeError(f"$amount must be a Decimal, but provided value is: {amount!r}")

        # Raise: amount must be a finite number at the canonical scale of the currency
        if not amount.is_finite() or amount.as_tuple().exponent != -currency.decimal_places:
            raise ValueError(f"$amount must be finite with exactly {currency.decimal_places} decimal place(s), but provided value is: {amount}")

        # Normalize negative zero
        if amount.is_zero() and amount.is_signed():
            amount = amount.copy_abs()

        self._currency = currency
        self._amount = amount

    # region Factories

    @classmethod
    def of(
        cls,
        currency: CurrencyLike,
        amount: DecimalLike,
        rounding_mode: RoundingMode | str | None = None,
        *,
        registry: CurrencyRegistry | None = None,
    ) -> Money:
        """Create Money from a currency and a decimal amount.

        Args:
            currency: Currency or its code.
            amount: Decimal amount.
            rounding_mode: If given, $amount is rounded to the currency scale with it.
                If None, $amount must not have more decimal places than the currency.
            registry: Registry used to resolve currency codes.

        Returns:
            Money: New instance.

        Raises:
            NullArgumentError: If $currency or $amount is None.
            UnknownCurrencyError: If the currency code is not registered.
            InexactAmountError: If no rounding mode is given and $amount has too many decimal places.
            InexactRoundingError: If $rounding_mode is UNNECESSARY and rounding is needed.
            MoneyOverflowError: If the amount in minor units does not fit into 128 bits.
        """
        if currency is None:
            raise NullArgumentError("currency")
        if amount is None:
            raise NullArgumentError("amount")

        currency = _resolve_currency(currency, registry)
        value = as_decimal(amount)
        decimal_places = currency.decimal_places

        if rounding_mode is None:
            # Raise: without a rounding mode the amount must not have more decimal places than the currency
            if scale_of(value) > decimal_places:
                raise InexactAmountError(value, decimal_places)
            rounding_mode = RoundingMode.UNNECESSARY

        check_magnitude(value, decimal_places, bits=128)
        rescaled = rescale(value, decimal_places, rounding_mode)
        check_int128(to_minor_units(rescaled, decimal_places))
        return cls(currency, rescaled)

    @classmethod
    def of_major(cls, currency: CurrencyLike, major_units: int, *, registry: CurrencyRegistry | None = None) -> Money:
        """Create Money from a whole number of major units, e.g. `of_major("GBP", 234)` is `GBP 234.00`.

        Raises:
            MoneyOverflowError: If the amount in minor units does not fit into 64 bits.
        """
        if major_units is None:
            raise NullArgumentError("major_units")
        currency = _resolve_currency(currency, registry)
        major_units = as_int(major_units, "major_units")

        minor_units = check_int64(major_units * 10**currency.decimal_places)
        return cls(currency, from_minor_units(minor_units, currency.decimal_places))

    @classmethod
    def of_minor(cls, currency: CurrencyLike, minor_units: int, *, registry: CurrencyRegistry | None = None) -> Money:
        """Create Money from a number of minor units, e.g. `of_minor("GBP", 234)` is `GBP 2.34`.

        Raises:
            MoneyOverflowError: If $minor_units does not fit into 64 bits.
        """
        if minor_units is None:
            raise NullArgumentError("minor_units")
        currency = _resolve_currency(currency, registry)
        minor_units = check_int64(as_int(minor_units, "minor_units"))

        return cls(currency, from_minor_units(minor_units, currency.decimal_places))

    @classmethod
    def zero(cls, currency: CurrencyLike, *, registry: CurrencyRegistry | None = None) -> Money:
        """Create zero Money in $currency."""
        currency = _resolve_currency(currency, registry)
        return cls(currency, from_minor_units(0, currency.decimal_places))

    @classmethod
    def parse(cls, text: str, *, registry: CurrencyRegistry | None = None) -> Money:
        """Parse Money from its canonical text form, e.g. 'GBP 2.34' or 'JPY -423'.

        The text is a three-letter currency code, exactly one space and a decimal number.
        The number must not have more decimal places than the currency.

        Args:
            text (str): Text to parse.
            registry: Registry used to resolve the currency code.

        Returns:
            Money: Parsed instance.

        Raises:
            NullArgumentError: If $text is None.
            MalformedMoneyError: If $text does not have the canonical form.
            UnknownCurrencyError: If the currency code is not registered.
            InexactAmountError: If the amount has more decimal places than the currency.
        """
        if text is None:
            raise NullArgumentError("text")
        if not isinstance(text, str):
            raise TypeError(f"$text must be a string, but provided value is: {text!r}")

        if len(text) < _MIN_TEXT_LENGTH:
            raise MalformedMoneyError(text, f"text must have at least {_MIN_TEXT_LENGTH} characters")
        if text[3] != " ":
            raise MalformedMoneyError(text, "currency code must be followed by a single space")

        code, amount_text = text[:3], text[4:]
        currency = _resolve_currency(code, registry)

        if not _AMOUNT_PATTERN.fullmatch(amount_text):
            raise MalformedMoneyError(text, f"'{amount_text}' is not a decimal number")

        return cls.of(currency, Decimal(amount_text))

    @classmethod
    def total(cls, *monies: Money | Iterable[Money]) -> Money:
        """Sum Money amounts in the same currency.

        Accepts either several Money arguments or a single iterable of Money.

        Raises:
            ValueError: If no Money is provided.
            CurrencyMismatchError: If the currencies differ.
            MoneyOverflowError: If the sum does not fit into 64 bits of minor units.
        """
        if len(monies) == 1 and not isinstance(monies[0], Money):
            if monies[0] is None:
                raise NullArgumentError("monies")
            monies = tuple(monies[0])

        if not monies:
            raise ValueError("Cannot call `total` because no $monies were provided")

        result = monies[0]
        if result is None:
            raise NullArgumentError("monies")
        for money in monies[1:]:
            result = result.plus(money)
        return result

    @classmethod
    def non_null(cls, money: Money | None, currency: CurrencyLike, *, registry: CurrencyRegistry | None = None) -> Money:
        """Return $money, or zero in $currency if $money is None.

        Raises:
            CurrencyMismatchError: If $money is not in $currency.
        """
        currency = _resolve_currency(currency, registry)
        if money is None:
            return cls.zero(currency)
        if money.currency != currency:
            raise CurrencyMismatchError(currency, money.currency)
        return money

    # endregion

    # region Accessors

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def decimal_places(self) -> int:
        """Get the number of decimal places of the currency."""
        return self._currency.decimal_places

    @property
    def amount(self) -> Decimal:
        """Get the exact amount, scaled to the currency decimal places."""
        return self._amount

    @property
    def amount_major(self) -> int:
        """Whole major units (truncated toward zero), e.g. 2 for `GBP 2.34` and -5 for `GBP -5.78`.

        Raises:
            MoneyOverflowError: If the value does not fit into 64 bits.
        """
        return check_int64(int(self._amount), "major units")

    @property
    def amount_major_int(self) -> int:
        """Like `amount_major`, but limited to 32 bits."""
        return check_int32(int(self._amount), "major units")

    @property
    def amount_minor(self) -> int:
        """Whole amount in minor units, e.g. 234 for `GBP 2.34`.

        Raises:
            MoneyOverflowError: If the value does not fit into 64 bits.
        """
        return check_int64(self._minor_units())

    @property
    def amount_minor_int(self) -> int:
        """Like `amount_minor`, but limited to 32 bits."""
        return check_int32(self._minor_units())

    @property
    def minor_part(self) -> int:
        """Minor units left after removing the major units; keeps the sign (-78 for `GBP -5.78`)."""
        return self._minor_units() - int(self._amount) * 10**self.decimal_places

    def _minor_units(self) -> int:
        return to_minor_units(self._amount, self.decimal_places)

    def is_zero(self) -> bool:
        """Check if the amount is zero."""
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        """Check if the amount is greater than zero."""
        return self._amount > 0

    def is_positive_or_zero(self) -> bool:
        """Check if the amount is zero or greater."""
        return self._amount >= 0

    def is_negative(self) -> bool:
        """Check if the amount is less than zero."""
        return self._amount < 0

    def is_negative_or_zero(self) -> bool:
        """Check if the amount is zero or less."""
        return self._amount <= 0

    def is_same_currency(self, other: Money) -> bool:
        """Check whether $other has the same currency; never raises on different currencies."""
        return self._currency == self._require_money(other).currency

    # endregion

    # region Copies with changes

    def with_currency(
        self,
        currency: CurrencyLike,
        rounding_mode: RoundingMode | str | None = None,
        *,
        registry: CurrencyRegistry | None = None,
    ) -> Money:
        """Return Money with the same numeric amount in another currency.

        The amount is rescaled to the decimal places of $currency.

        Args:
            currency: The new currency.
            rounding_mode: Rounding used if the new currency has fewer decimal places.
                If None, the amount must be representable in the new currency.
            registry: Registry used to resolve currency codes.

        Raises:
            InexactAmountError: If no rounding mode is given and rescaling loses precision.
            InexactRoundingError: If $rounding_mode is UNNECESSARY and rescaling loses precision.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        currency = _resolve_currency(currency, registry)
        if currency == self._currency:
            return self

        decimal_places = currency.decimal_places
        if rounding_mode is None:
            if not is_representable(self._amount, decimal_places):
                raise InexactAmountError(self._amount, decimal_places)
            rounding_mode = RoundingMode.UNNECESSARY

        amount = rescale(self._amount, decimal_places, rounding_mode)
        check_int64(to_minor_units(amount, decimal_places))
        return Money(currency, amount)

    def with_amount(self, amount: DecimalLike) -> Money:
        """Return Money with the same currency and another amount.

        Raises:
            InexactAmountError: If $amount has more decimal places than the currency.
            MoneyOverflowError: If $amount in minor units does not fit into 128 bits.
        """
        if amount is None:
            raise NullArgumentError("amount")

        value = as_decimal(amount)
        if scale_of(value) > self.decimal_places:
            raise InexactAmountError(value, self.decimal_places)

        check_magnitude(value, self.decimal_places, bits=128)
        rescaled = rescale(value, self.decimal_places, RoundingMode.UNNECESSARY)
        check_int128(to_minor_units(rescaled, self.decimal_places))
        return self._with_amount(rescaled)

    def _with_amount(self, amount: Decimal) -> Money:
        if amount == self._amount:
            return self
        return Money(self._currency, amount)

    def _checked(self, amount: Decimal) -> Money:
        """Result of an arithmetic operation: verify the 64-bit minor-unit range first."""
        check_int64(to_minor_units(amount, self.decimal_places))
        return self._with_amount(amount)

    def _with_minor_units(self, minor_units: int) -> Money:
        return self._with_amount(from_minor_units(check_int64(minor_units), self.decimal_places))

    # endregion

    # region Arithmetic

    def plus(self, other: Money | DecimalLike) -> Money:
        """Add Money in the same currency or a decimal amount.

        Raises:
            CurrencyMismatchError: If $other is Money in a different currency.
            InexactAmountError: If a decimal $other has more decimal places than the currency.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        value = self._operand_amount(other)
        if value.is_zero():
            return self
        return self._checked(rescale(exact_add(self._amount, value), self.decimal_places, RoundingMode.UNNECESSARY))

    def plus_major(self, major_units: int) -> Money:
        """Add whole major units."""
        return self.plus_minor(self._major_to_minor(major_units))

    def plus_minor(self, minor_units: int) -> Money:
        """Add minor units."""
        if minor_units is None:
            raise NullArgumentError("minor_units")
        minor_units = as_int(minor_units, "minor_units")
        if minor_units == 0:
            return self
        return self._with_minor_units(self._minor_units() + minor_units)

    def minus(self, other: Money | DecimalLike) -> Money:
        """Subtract Money in the same currency or a decimal amount.

        Raises:
            CurrencyMismatchError: If $other is Money in a different currency.
            InexactAmountError: If a decimal $other has more decimal places than the currency.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        value = self._operand_amount(other)
        if value.is_zero():
            return self
        return self._checked(rescale(exact_subtract(self._amount, value), self.decimal_places, RoundingMode.UNNECESSARY))

    def minus_major(self, major_units: int) -> Money:
        """Subtract whole major units."""
        return self.minus_minor(self._major_to_minor(major_units))

    def minus_minor(self, minor_units: int) -> Money:
        """Subtract minor units."""
        if minor_units is None:
            raise NullArgumentError("minor_units")
        minor_units = as_int(minor_units, "minor_units")
        if minor_units == 0:
            return self
        return self._with_minor_units(self._minor_units() - minor_units)

    def multiplied_by(self, multiplier: DecimalLike, rounding_mode: RoundingMode | str | None = None) -> Money:
        """Multiply by $multiplier and round the product to the currency scale.

        Args:
            multiplier: Decimal or integer factor.
            rounding_mode: Rounding of the product. If None, the product must be exact at the currency scale.

        Raises:
            InexactRoundingError: If the product needs rounding and no (or UNNECESSARY) rounding mode is given.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        if multiplier is None:
            raise NullArgumentError("multiplier")
        value = as_decimal(multiplier)
        mode = RoundingMode.UNNECESSARY if rounding_mode is None else RoundingMode.coerce(rounding_mode)

        if value == 1:
            return self

        if not self.is_zero() and not value.is_zero():
            check_magnitude(order_of_product(self._amount, value), self.decimal_places)

        product = exact_multiply(self._amount, value)
        return self._checked(rescale(product, self.decimal_places, mode))

    def divided_by(self, divisor: DecimalLike, rounding_mode: RoundingMode | str | None = None) -> Money:
        """Divide by $divisor and round the quotient to the currency scale.

        Args:
            divisor: Decimal or integer divisor.
            rounding_mode: Rounding of the quotient. If None, the quotient is truncated toward zero
                (`RoundingMode.DOWN`), so `GBP 2.34 / -3` is `GBP -0.78`.

        Raises:
            ZeroDivisionError: If $divisor is zero.
            InexactRoundingError: If $rounding_mode is UNNECESSARY and the quotient needs rounding.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        if divisor is None:
            raise NullArgumentError("divisor")
        value = as_decimal(divisor)
        mode = RoundingMode.DOWN if rounding_mode is None else RoundingMode.coerce(rounding_mode)

        if value == 1:
            return self

        if not self.is_zero() and not value.is_zero():
            check_magnitude(order_of_quotient(self._amount, value), self.decimal_places)

        return self._checked(divide(self._amount, value, self.decimal_places, mode))

    def negated(self) -> Money:
        """Return the amount with opposite sign.

        Raises:
            MoneyOverflowError: If the amount is the most negative 64-bit minor value.
        """
        if self.is_zero():
            return self
        return self._with_minor_units(-self._minor_units())

    def abs(self) -> Money:
        """Return the absolute amount; the receiver itself if it is not negative."""
        if self.is_negative():
            return self.negated()
        return self

    def _major_to_minor(self, major_units: int) -> int:
        if major_units is None:
            raise NullArgumentError("major_units")
        return as_int(major_units, "major_units") * 10**self.decimal_places

    def _operand_amount(self, other: Money | DecimalLike) -> Decimal:
        """Amount of an operand of plus/minus, validated against the currency of this Money."""
        if other is None:
            raise NullArgumentError("other")
        if isinstance(other, Money):
            self._check_same_currency(other)
            return other.amount

        value = as_decimal(other)
        check_magnitude(value, self.decimal_places, bits=128)
        if not is_representable(value, self.decimal_places):
            raise InexactAmountError(value, self.decimal_places)
        return value

    # endregion

    # region Rounding and conversion

    def rounded(self, scale: int, rounding_mode: RoundingMode | str) -> Money:
        """Round the amount to $scale decimal places, keeping the currency scale.

        `GBP 432.34` rounded to scale -1 with `RoundingMode.UP` is `GBP 440.00`.

        Args:
            scale: Number of decimal places to keep; negative values round to tens, hundreds, ...
            rounding_mode: Rounding policy.

        Raises:
            InvalidScaleError: If $scale exceeds the decimal places of the currency.
            InexactRoundingError: If $rounding_mode is UNNECESSARY and rounding is needed.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        if scale is None:
            raise NullArgumentError("scale")
        scale = as_int(scale, "scale")
        mode = RoundingMode.coerce(rounding_mode)

        # Raise: rounding cannot add precision the currency does not have
        if scale > self.decimal_places:
            raise InvalidScaleError(scale, self.decimal_places)

        if scale == self.decimal_places:
            return self

        scale = max(scale, self.decimal_places - _MAX_ROUNDING_DIGITS)
        rounded_value = rescale(self._amount, scale, mode)
        check_magnitude(rounded_value, self.decimal_places)
        return self._checked(rescale(rounded_value, self.decimal_places, RoundingMode.UNNECESSARY))

    def converted_to(
        self,
        currency: CurrencyLike,
        multiplier: DecimalLike,
        rounding_mode: RoundingMode | str | None = None,
        *,
        registry: CurrencyRegistry | None = None,
    ) -> Money:
        """Convert to another currency using an exchange rate $multiplier.

        Args:
            currency: Target currency (must differ from the current one).
            multiplier: Exchange rate, strictly positive.
            rounding_mode: Rounding to the target currency scale; truncates (`RoundingMode.DOWN`) if None.
            registry: Registry used to resolve currency codes.

        Raises:
            InvalidConversionError: If $currency is the current currency or $multiplier is not positive.
            InexactRoundingError: If $rounding_mode is UNNECESSARY and rounding is needed.
            MoneyOverflowError: If the result does not fit into 64 bits of minor units.
        """
        if currency is None:
            raise NullArgumentError("currency")
        if multiplier is None:
            raise NullArgumentError("multiplier")

        currency = _resolve_currency(currency, registry)
        value = as_decimal(multiplier)
        mode = RoundingMode.DOWN if rounding_mode is None else RoundingMode.coerce(rounding_mode)

        # Raise: conversion within one currency is plain arithmetic
        if currency == self._currency:
            raise InvalidConversionError(f"Cannot convert {self} to the same $currency {currency}; use `multiplied_by` instead")

        # Raise: exchange rate must be positive
        if value <= 0:
            raise InvalidConversionError(f"Cannot convert {self} to {currency} because $multiplier must be positive, but provided value is: {value}")

        if not self.is_zero():
            check_magnitude(order_of_product(self._amount, value), currency.decimal_places)

        amount = rescale(exact_multiply(self._amount, value), currency.decimal_places, mode)
        check_int64(to_minor_units(amount, currency.decimal_places))
        return Money(currency, amount)

    # endregion

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Compare amounts in the same currency; returns -1, 0 or 1.

        Raises:
            CurrencyMismatchError: If the currencies differ.
        """
        other = self._require_money(other)
        self._check_same_currency(other)
        return (self._amount > other.amount) - (self._amount < other.amount)

    def is_greater_than(self, other: Money) -> bool:
        """Check if this amount is greater than $other (same currency required)."""
        return self.compare_to(other) > 0

    def is_less_than(self, other: Money) -> bool:
        """Check if this amount is less than $other (same currency required)."""
        return self.compare_to(other) < 0

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self._currency != other.currency:
            raise CurrencyMismatchError(self._currency, other.currency)

    @staticmethod
    def _require_money(other: Money) -> Money:
        if other is None:
            raise NullArgumentError("other")
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        return other

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self._currency == other.currency and self._amount == other.amount

    def __hash__(self) -> int:
        """Hash based on currency code and amount."""
        return hash((self._currency.code, self._amount))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    # endregion

    # region Operators

    def __add__(self, other):
        """Add Money (same currency) or a decimal amount."""
        if not isinstance(other, (Money, Decimal, int)):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        """Right addition, so that `sum()` works on Money."""
        return self.__add__(other)

    def __sub__(self, other):
        """Subtract Money (same currency) or a decimal amount."""
        if not isinstance(other, (Money, Decimal, int)):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other):
        """Right subtraction: number - Money."""
        if not isinstance(other, (Decimal, int)):
            return NotImplemented
        return self.negated().plus(other)

    def __mul__(self, other):
        """Multiply by a number; the product must be exact at the currency scale."""
        if not isinstance(other, (Decimal, int)):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide by a number, truncating toward zero."""
        if not isinstance(other, (Decimal, int)):
            return NotImplemented
        return self.divided_by(other)

    def __neg__(self):
        return self.negated()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    # endregion

    def __reduce__(self):
        return (self.__class__, (self._currency, self._amount))

    def __str__(self) -> str:
        """Return canonical string like 'GBP 2.34'."""
        return f"{self._currency.code} {self._amount:f}"

    def __repr__(self) -> str:
        """Return string like "Money('GBP 2.34')"."""
        return f"{self.__class__.__name__}('{self}')"
