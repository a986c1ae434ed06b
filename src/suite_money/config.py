"""Central configuration of suite_money.

Integer bounds of the minor-unit domain and settings resolved from the
environment (optionally populated from a `.env` file).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

# --- Integer ranges ---
MIN_INT64: int = -(2**63)
MAX_INT64: int = 2**63 - 1
MIN_INT32: int = -(2**31)
MAX_INT32: int = 2**31 - 1
# Amounts accepted by the factories (`Money.of`, `Money.parse`) may exceed the 64-bit
# arithmetic domain, but their minor units must fit into 128 bits
MIN_INT128: int = -(2**127)
MAX_INT128: int = 2**127 - 1

# --- Environment ---
# Path of a CSV file with additional currency definitions (code,decimal_places,name,currency_type)
ENV_CURRENCY_DATA: str = "SUITE_MONEY_CURRENCY_DATA"


@dataclass(frozen=True)
class Settings:
    """Runtime settings of suite_money.

    Attributes:
        currency_data_path: Optional CSV file with extra currencies loaded into the
            default currency registry.
    """

    currency_data_path: Path | None = None


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    """Resolve `Settings` from environment variables.

    Variables from a `.env` file are read as defaults; variables present in the
    environment take precedence. The process environment is never modified.

    Args:
        dotenv_path: Optional explicit `.env` file. If None, python-dotenv searches
            for a `.env` file starting in the current working directory.

    Returns:
        Settings resolved from the environment.
    """
    if dotenv_path is None:
        dotenv_path = find_dotenv(usecwd=True)
    values = {key: value for key, value in dotenv_values(dotenv_path).items() if value is not None}
    values.update(os.environ)

    raw_path = values.get(ENV_CURRENCY_DATA, "").strip()
    currency_data_path = Path(raw_path) if raw_path else None

    if currency_data_path is not None:
        logger.info(f"Using extra currency data from ${ENV_CURRENCY_DATA} = '{currency_data_path}'")

    return Settings(currency_data_path=currency_data_path)
