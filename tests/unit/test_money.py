"""Unit tests for money helpers"""

import pytest
from decimal import Decimal
from purchase_coach.utils.money import clamp, format_money, parse_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        (120, Decimal("120")),
        (19.99, Decimal("19.99")),
        ("£1,250.50", Decimal("1250.50")),
        (" $40 ", Decimal("40")),
        (Decimal("3.5"), Decimal("3.5")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", [None, True, "", "£", "abc", "inf", "NaN", [1]])
def test_parse_amount_rejects(value):
    with pytest.raises(ValueError):
        parse_amount(value)


def test_format_money():
    assert format_money(Decimal("50")) == "£50"
    assert format_money(Decimal("1250.5")) == "£1,250.50"
    assert format_money(Decimal("0.999")) == "£1"


def test_clamp():
    assert clamp(-5, 0, 100) == 0
    assert clamp(150, 0, 100) == 100
    assert clamp(42, 0, 100) == 42


def test_format_money_beyond_decimal_precision():
    assert format_money(Decimal("1e26")) == "£100,000,000,000,000,000,000,000,000"
    assert format_money(Decimal("123456789012345678901234567.5")) == "£123,456,789,012,345,678,901,234,567.50"
