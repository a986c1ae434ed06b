from decimal import Decimal

import pytest

from suite_money.config import MAX_INT64, MIN_INT64
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    InexactAmountError,
    InexactRoundingError,
    MoneyOverflowError,
    NullArgumentError,
)
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode
from tests.helpers.helper_currency import EUR, GBP, JPY

GBP_0 = Money.zero(GBP)
GBP_2_33 = Money.of(GBP, Decimal("2.33"))
GBP_2_34 = Money.of(GBP, Decimal("2.34"))
GBP_2_35 = Money.of(GBP, Decimal("2.35"))
GBP_M1_23 = Money.of(GBP, Decimal("-1.23"))
GBP_MAX = Money.of_minor(GBP, MAX_INT64)
GBP_MIN = Money.of_minor(GBP, MIN_INT64)
EUR_2_34 = Money.of(EUR, Decimal("2.34"))


def gbp(amount: str) -> Money:
    return Money.of(GBP, Decimal(amount))


# region plus / minus


def test_plus_money():
    assert GBP_2_34.plus(GBP_M1_23) == gbp("1.11")
    assert GBP_2_34.plus(GBP_2_34) == gbp("4.68")
    assert GBP_2_34.plus(GBP_M1_23) == GBP_M1_23.plus(GBP_2_34)


def test_plus_decimal_and_int():
    assert GBP_2_34.plus(Decimal("1.23")) == gbp("3.57")
    assert GBP_2_34.plus(2) == gbp("4.34")
    assert GBP_2_34.plus("-0.34") == gbp("2.00")
    # Value-based check: trailing zeros are fine for operands
    assert GBP_2_34.plus(Decimal("1.230")) == gbp("3.57")


def test_plus_zero_returns_same_instance():
    assert GBP_2_34.plus(GBP_0) is GBP_2_34
    assert GBP_2_34.plus(Decimal("0.000")) is GBP_2_34
    assert GBP_2_34.minus(0) is GBP_2_34


def test_plus_rejects_invalid_operands():
    with pytest.raises(CurrencyMismatchError):
        GBP_2_34.plus(EUR_2_34)
    with pytest.raises(InexactAmountError):
        GBP_2_34.plus(Decimal("1.235"))
    with pytest.raises(NullArgumentError):
        GBP_2_34.plus(None)
    with pytest.raises(TypeError):
        GBP_2_34.plus(1.5)


def test_plus_overflow():
    assert GBP_MAX.plus(GBP_0) is GBP_MAX
    assert GBP_MAX.minus(Money.of_minor(GBP, 1)).amount_minor == MAX_INT64 - 1

    with pytest.raises(MoneyOverflowError):
        GBP_MAX.plus(Money.of_minor(GBP, 1))
    with pytest.raises(MoneyOverflowError):
        GBP_MAX.plus(Decimal("0.01"))
    with pytest.raises(MoneyOverflowError):
        GBP_MIN.minus(Money.of_minor(GBP, 1))


def test_minus():
    assert GBP_2_34.minus(GBP_M1_23) == gbp("3.57")
    assert GBP_2_34.minus(Decimal("1.23")) == gbp("1.11")
    assert GBP_2_34.minus(GBP_2_34) == GBP_0

    with pytest.raises(CurrencyMismatchError):
        GBP_2_34.minus(EUR_2_34)
    with pytest.raises(InexactAmountError):
        GBP_2_34.minus(Decimal("0.001"))


def test_plus_and_minus_major_and_minor():
    assert GBP_2_34.plus_major(123) == gbp("125.34")
    assert GBP_2_34.plus_minor(123) == gbp("3.57")
    assert GBP_2_34.minus_major(123) == gbp("-120.66")
    assert GBP_2_34.minus_minor(123) == gbp("1.11")
    assert Money.of(JPY, 423).plus_minor(7) == Money.of(JPY, 430)

    assert GBP_2_34.plus_major(0) is GBP_2_34
    assert GBP_2_34.minus_minor(0) is GBP_2_34


def test_plus_and_minus_major_and_minor_overflow():
    with pytest.raises(MoneyOverflowError):
        GBP_MAX.plus_minor(1)
    with pytest.raises(MoneyOverflowError):
        GBP_MIN.minus_minor(1)
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.plus_major(MAX_INT64 // 100)
    with pytest.raises(TypeError):
        GBP_2_34.plus_minor(Decimal("1"))


# endregion

# region multiplied_by / divided_by


def test_multiplied_by_exact():
    assert GBP_2_34.multiplied_by(3) == gbp("7.02")
    assert GBP_2_34.multiplied_by(-3) == gbp("-7.02")
    assert GBP_2_34.multiplied_by(Decimal("0.5")) == gbp("1.17")
    assert GBP_2_34.multiplied_by(0) == GBP_0


def test_multiplied_by_one_returns_same_instance():
    assert GBP_2_34.multiplied_by(1) is GBP_2_34
    assert GBP_2_34.multiplied_by(Decimal("1.000")) is GBP_2_34


def test_multiplied_by_with_rounding_mode():
    assert GBP_2_33.multiplied_by(Decimal("2.5"), RoundingMode.DOWN) == gbp("5.82")
    assert GBP_2_33.multiplied_by(Decimal("2.5"), RoundingMode.HALF_UP) == gbp("5.83")
    assert GBP_2_33.multiplied_by(Decimal("-2.5"), RoundingMode.FLOOR) == gbp("-5.83")
    assert GBP_2_33.multiplied_by(Decimal("-2.5"), RoundingMode.CEILING) == gbp("-5.82")


def test_multiplied_by_inexact_without_rounding_mode():
    with pytest.raises(InexactRoundingError):
        GBP_2_33.multiplied_by(Decimal("2.5"))
    with pytest.raises(InexactRoundingError):
        GBP_2_33.multiplied_by(Decimal("2.5"), RoundingMode.UNNECESSARY)


def test_multiplied_by_overflow():
    with pytest.raises(MoneyOverflowError):
        GBP_MAX.multiplied_by(2)
    with pytest.raises(MoneyOverflowError):
        GBP_MIN.multiplied_by(-1)
    assert GBP_MAX.multiplied_by(-1).amount_minor == -MAX_INT64


def test_divided_by_truncates_by_default():
    assert GBP_2_34.divided_by(3) == gbp("0.78")
    assert GBP_2_35.divided_by(3) == gbp("0.78")
    assert GBP_2_34.divided_by(-3) == gbp("-0.78")
    assert GBP_2_34.divided_by(Decimal("2.5")) == gbp("0.93")


def test_divided_by_with_rounding_mode():
    assert GBP_2_35.divided_by(3, RoundingMode.UP) == gbp("0.79")
    assert GBP_2_34.divided_by(Decimal("2.5"), RoundingMode.HALF_UP) == gbp("0.94")
    assert GBP_2_34.divided_by(Decimal("-2.5"), RoundingMode.FLOOR) == gbp("-0.94")
    assert GBP_2_34.divided_by(Decimal("-2.5"), RoundingMode.CEILING) == gbp("-0.93")

    with pytest.raises(InexactRoundingError):
        GBP_2_35.divided_by(3, RoundingMode.UNNECESSARY)


def test_divided_by_edge_cases():
    assert GBP_2_34.divided_by(1) is GBP_2_34
    assert GBP_0.divided_by(7) == GBP_0

    with pytest.raises(ZeroDivisionError):
        GBP_2_34.divided_by(0)
    with pytest.raises(ZeroDivisionError):
        GBP_2_34.divided_by(Decimal("0.00"), RoundingMode.HALF_UP)
    with pytest.raises(MoneyOverflowError):
        GBP_MAX.divided_by(Decimal("0.5"))
    with pytest.raises(NullArgumentError):
        GBP_2_34.divided_by(None)


# endregion

# region negated / abs


def test_negated():
    assert GBP_2_34.negated() == gbp("-2.34")
    assert GBP_M1_23.negated() == gbp("1.23")
    assert GBP_0.negated() is GBP_0
    assert GBP_MAX.negated().amount_minor == -MAX_INT64

    with pytest.raises(MoneyOverflowError):
        GBP_MIN.negated()


def test_abs():
    assert GBP_2_34.abs() is GBP_2_34
    assert GBP_0.abs() is GBP_0
    assert GBP_M1_23.abs() == gbp("1.23")

    with pytest.raises(MoneyOverflowError):
        GBP_MIN.abs()


# endregion

# region with_amount / with_currency


def test_with_amount():
    assert GBP_2_34.with_amount(Decimal("5.78")) == gbp("5.78")
    assert GBP_2_34.with_amount(1) == gbp("1.00")
    assert GBP_2_34.with_amount(Decimal("2.34")) is GBP_2_34

    with pytest.raises(InexactAmountError):
        GBP_2_34.with_amount(Decimal("5.789"))
    with pytest.raises(NullArgumentError):
        GBP_2_34.with_amount(None)


def test_with_currency():
    assert GBP_2_34.with_currency(EUR) == EUR_2_34
    assert GBP_2_34.with_currency("EUR") == EUR_2_34
    assert GBP_2_34.with_currency(GBP) is GBP_2_34
    assert str(Money.of(JPY, 423).with_currency(GBP)) == "GBP 423.00"
    assert str(gbp("2.00").with_currency(JPY)) == "JPY 2"


def test_with_currency_to_fewer_decimal_places():
    assert str(GBP_2_34.with_currency(JPY, RoundingMode.DOWN)) == "JPY 2"
    assert str(GBP_2_34.with_currency(JPY, RoundingMode.UP)) == "JPY 3"

    with pytest.raises(InexactAmountError):
        GBP_2_34.with_currency(JPY)
    with pytest.raises(InexactRoundingError):
        GBP_2_34.with_currency(JPY, RoundingMode.UNNECESSARY)


def test_with_currency_overflow():
    with pytest.raises(MoneyOverflowError):
        Money.of_minor(JPY, MAX_INT64).with_currency(GBP)


# endregion

# region huge operands


@pytest.mark.parametrize("operand", [Decimal("1E+999999999999"), Decimal("-1E+999999999999"), "1E+40"])
def test_plus_and_minus_reject_huge_operands(operand):
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.plus(operand)
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.minus(operand)


def test_plus_rejects_tiny_operand_as_inexact():
    with pytest.raises(InexactAmountError):
        GBP_2_34.plus(Decimal("1E-999999999999"))
    assert GBP_2_34.plus(Decimal("0E-999999999999")) is GBP_2_34


def test_multiplied_by_huge_factor():
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.multiplied_by(Decimal("1E+999999999999"))
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.multiplied_by(Decimal("-1E+999999999999"), RoundingMode.DOWN)
    assert GBP_0.multiplied_by(Decimal("1E+999999999999")) == GBP_0
    assert GBP_2_34.multiplied_by(Decimal("1E-999999999999"), RoundingMode.DOWN) == GBP_0


def test_divided_by_tiny_divisor():
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.divided_by(Decimal("1E-999999999999"))
    assert GBP_0.divided_by(Decimal("1E-999999999999")) == GBP_0
    assert GBP_2_34.divided_by(Decimal("1E+999999999999")) == GBP_0
    assert GBP_2_34.divided_by(Decimal("1E+999999999999"), RoundingMode.UP) == gbp("0.01")


def test_with_amount_rejects_huge_amount():
    with pytest.raises(MoneyOverflowError):
        GBP_2_34.with_amount(Decimal("1E+999999999999"))


# endregion
