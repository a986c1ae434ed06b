from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator

from suite_money.config import Settings, load_settings
from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.errors import NullArgumentError, UnknownCurrencyError

logger = logging.getLogger(__name__)

CSV_FIELDS = ("code", "decimal_places", "name", "currency_type")


class CurrencyRegistry:
    """Lookup of currencies by their three-letter code.

    A registry is a plain object, so callers can build their own (for example a small
    fixture registry in tests) and pass it to `Money` factories via `registry=`.
    Reads never mutate the registry; registration is expected to happen up front.
    """

    def __init__(self, currencies: Iterable[Currency] = ()):
        self._currencies_by_code: dict[str, Currency] = {}
        for currency in currencies:
            self.register(currency)

    def register(self, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in self._currencies_by_code and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        self._currencies_by_code[currency.code] = currency
        logger.debug(f"Registered currency {currency!r}")

    def get(self, code: str) -> Currency:
        """Get currency by code.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            NullArgumentError: If $code is None.
            UnknownCurrencyError: If currency code is not registered.
        """
        if code is None:
            raise NullArgumentError("code")
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        currency = self._currencies_by_code.get(code)
        if currency is None:
            raise UnknownCurrencyError(code, self.codes())

        return currency

    def decimal_places(self, code: str) -> int:
        """Number of decimal places of the currency with $code."""
        return self.get(code).decimal_places

    def is_valid(self, code: str) -> bool:
        """Check whether $code is a registered currency code."""
        if code is None:
            raise NullArgumentError("code")
        return isinstance(code, str) and code in self._currencies_by_code

    def codes(self) -> list[str]:
        """Sorted list of all registered codes."""
        return sorted(self._currencies_by_code)

    def load_csv(self, path: str | Path, overwrite: bool = False) -> int:
        """Register currencies defined in a CSV file.

        The file needs a header row with columns `code,decimal_places,name,currency_type`.
        Column `currency_type` is optional and defaults to FIAT.

        Args:
            path: CSV file to read.
            overwrite: Whether currencies from the file may replace registered ones.

        Returns:
            Number of currencies registered from the file.

        Raises:
            ValueError: If a row is malformed or a code is already registered.
        """
        path = Path(path)
        count = 0
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [field for field in CSV_FIELDS[:3] if field not in (reader.fieldnames or [])]
            if missing:
                raise ValueError(f"Currency file '{path}' is missing column(s) {missing}")

            for row in reader:
                try:
                    currency = Currency(
                        code=(row["code"] or "").strip(),
                        decimal_places=int(row["decimal_places"]),
                        name=row["name"] or "",
                        currency_type=CurrencyType((row.get("currency_type") or CurrencyType.FIAT.value).strip().upper()),
                    )
                except (TypeError, ValueError) as e:
                    raise ValueError(f"Invalid currency definition on line {reader.line_num} of '{path}': {e}") from e

                self.register(currency, overwrite=overwrite)
                count += 1

        logger.info(f"Loaded {count} currency(ies) from '{path}'")
        return count

    def __contains__(self, code: object) -> bool:
        return code in self._currencies_by_code

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies_by_code.values())

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.codes()})"


# Fiat currencies
USD = Currency("USD", 2, "US Dollar")
EUR = Currency("EUR", 2, "Euro")
GBP = Currency("GBP", 2, "British Pound")
JPY = Currency("JPY", 0, "Japanese Yen")
CHF = Currency("CHF", 2, "Swiss Franc")
CAD = Currency("CAD", 2, "Canadian Dollar")
AUD = Currency("AUD", 2, "Australian Dollar")
NZD = Currency("NZD", 2, "New Zealand Dollar")
SEK = Currency("SEK", 2, "Swedish Krona")
NOK = Currency("NOK", 2, "Norwegian Krone")
DKK = Currency("DKK", 2, "Danish Krone")
PLN = Currency("PLN", 2, "Polish Zloty")
CZK = Currency("CZK", 2, "Czech Koruna")
HUF = Currency("HUF", 2, "Hungarian Forint")
CNY = Currency("CNY", 2, "Chinese Yuan")
HKD = Currency("HKD", 2, "Hong Kong Dollar")
SGD = Currency("SGD", 2, "Singapore Dollar")
INR = Currency("INR", 2, "Indian Rupee")
KRW = Currency("KRW", 0, "South Korean Won")
ISK = Currency("ISK", 0, "Icelandic Krona")
BHD = Currency("BHD", 3, "Bahraini Dinar")
KWD = Currency("KWD", 3, "Kuwaiti Dinar")
OMR = Currency("OMR", 3, "Omani Rial")
JOD = Currency("JOD", 3, "Jordanian Dinar")
TND = Currency("TND", 3, "Tunisian Dinar")
ZAR = Currency("ZAR", 2, "South African Rand")
MXN = Currency("MXN", 2, "Mexican Peso")
BRL = Currency("BRL", 2, "Brazilian Real")

# Commodities
XAU = Currency("XAU", 4, "Gold", CurrencyType.COMMODITY)
XAG = Currency("XAG", 4, "Silver", CurrencyType.COMMODITY)

PREDEFINED_CURRENCIES: tuple[Currency, ...] = (
    USD, EUR, GBP, JPY, CHF, CAD, AUD, NZD, SEK, NOK, DKK, PLN, CZK, HUF, CNY, HKD, SGD, INR,
    KRW, ISK, BHD, KWD, OMR, JOD, TND, ZAR, MXN, BRL,
    XAU, XAG,
)


def create_default_registry(settings: Settings | None = None) -> CurrencyRegistry:
    """Build a registry with all predefined currencies plus the ones configured in $settings.

    A configured currency file that does not exist is skipped with a warning.

    Args:
        settings: Settings to use. If None, they are resolved by `load_settings`.

    Returns:
        New `CurrencyRegistry`.

    Raises:
        ValueError: If the configured currency file exists but is malformed.
    """
    if settings is None:
        settings = load_settings()

    registry = CurrencyRegistry(PREDEFINED_CURRENCIES)
    path = settings.currency_data_path
    if path is not None:
        if path.is_file():
            registry.load_csv(path, overwrite=True)
        else:
            logger.warning(f"Currency data file '{path}' does not exist; using predefined currencies only")

    return registry


# Registry used by `Money` factories when no explicit registry is given
DEFAULT_CURRENCY_REGISTRY: CurrencyRegistry = create_default_registry()
