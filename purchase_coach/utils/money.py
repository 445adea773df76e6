"""Money parsing and formatting utilities"""

from decimal import Decimal, InvalidOperation
from typing import Any

CURRENCY_SYMBOL = "£"
_STRIP_CHARS = ("£", "$", "€", ",", " ")


def parse_amount(value: Any) -> Decimal:
    """
    Parse a user-supplied amount into a finite Decimal.

    Accepts ints, floats, Decimals and strings such as "£1,250.50".
    Raises ValueError for booleans, blanks, NaN/infinity and unparseable text.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError("not a number")

    if isinstance(value, str):
        text = value.strip()
        for char in _STRIP_CHARS:
            text = text.replace(char, "")
        if not text:
            raise ValueError("not a number")
        value = text
    elif isinstance(value, float):
        value = repr(value)

    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError("not a number") from e

    if not amount.is_finite():
        raise ValueError("not a finite number")
    return amount


def format_money(amount: Decimal) -> str:
    """Format as currency with two decimals, dropping them for whole amounts"""
    text = f"{amount:,.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    return f"{CURRENCY_SYMBOL}{text}"


def clamp(value, low, high):
    """Clamp value into [low, high]"""
    return max(low, min(high, value))
