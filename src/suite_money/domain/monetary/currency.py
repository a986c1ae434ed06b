from __future__ import annotations

import re
from enum import Enum

_CODE_PATTERN = re.compile(r"[A-Z]{3}")


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    COMMODITY = "COMMODITY"


class Currency:
    """Represents a currency with code, decimal places, and metadata.

    Instances are immutable. Two currencies are equal when their codes are equal.

    Attributes:
        code (str): Three-letter uppercase currency code (e.g., "USD", "JPY").
        decimal_places (int): Number of fractional digits of the currency (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, COMMODITY).
    """

    __slots__ = ("_code", "_decimal_places", "_name", "_currency_type")

    def __init__(self, code: str, decimal_places: int, name: str, currency_type: CurrencyType = CurrencyType.FIAT):
        """Initialize a Currency instance.

        Args:
            code (str): Three-letter uppercase currency code.
            decimal_places (int): Number of decimal places (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Raise: code must be three uppercase letters
        if not isinstance(code, str) or not _CODE_PATTERN.fullmatch(code):
            raise ValueError(f"$code must be three uppercase letters, but provided value is: '{code}'")

        # Raise: decimal places must be a small non-negative integer
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places < 0 or decimal_places > 18:
            raise ValueError(f"$decimal_places must be an integer between 0 and 18, but provided value is: {decimal_places}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code
        self._decimal_places = decimal_places
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def decimal_places(self) -> int:
        """Get the number of decimal places of the currency."""
        return self._decimal_places

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def is_fiat(self) -> bool:
        """Check if currency is fiat."""
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_commodity(self) -> bool:
        """Check if currency is a commodity (e.g. precious metal)."""
        return self._currency_type == CurrencyType.COMMODITY

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __reduce__(self):
        return (self.__class__, (self._code, self._decimal_places, self._name, self._currency_type))

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.decimal_places}, '{self.name}', {self.currency_type})"
