"""
Amount Handling Module

Decimal coercion and display helpers for balances and withdrawal amounts.
NEVER uses float for monetary values: floats are converted through str()
so they keep the value they print as.
"""

from decimal import Decimal, Inexact, InvalidOperation, getcontext, localcontext
from typing import Any

# Set global decimal context for financial precision
getcontext().prec = 28


def to_decimal(value: Any) -> Decimal:
    """
    Convert a numeric value to Decimal

    Args:
        value: int, float, str or Decimal

    Returns:
        Decimal value

    Raises:
        ValueError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        result = value
    elif value is None or isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert {value!r} to Decimal")

    if not result.is_finite():
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    return result


def subtract_exact(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """
    Subtract without rounding, whatever the magnitude of the operands

    The context precision is widened to cover every digit of both operands,
    so the result never depends on the global 28-digit context.
    """
    lowest_exponent = min(minuend.as_tuple().exponent, subtrahend.as_tuple().exponent)
    highest_digit = max(minuend.adjusted(), subtrahend.adjusted())

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, highest_digit - lowest_exponent + 2)
        ctx.traps[Inexact] = True
        return minuend - subtrahend


def format_amount(amount: Decimal, currency: str) -> str:
    """Format for display, e.g. 'USD 1,000.00'"""
    if amount.as_tuple().exponent >= -2:
        return f"{currency} {amount:,.2f}"
    return f"{currency} {amount:,f}"
