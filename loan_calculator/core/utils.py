from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def round_money(value: float) -> float:
    """Round a monetary amount to cents, half away from zero.

    Goes through ``repr`` so that 1.005 rounds to 1.01 like a cashier would,
    not to 1.0 as binary ``round`` does.
    """
    return float(Decimal(repr(float(value))).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def money(value: float, symbol: str = "$") -> str:
    rounded = round_money(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def percent(value: float, digits: int = 2) -> str:
    """Format a rate already expressed in percent (5.5 -> '5.50 %')."""
    return f"{value:.{digits}f} %"
