from typing import Optional

from compoundsim.config import get_settings


def format_currency(amount: float, symbol: Optional[str] = None, digits: int = 2) -> str:
    symbol = get_settings().currency_symbol if symbol is None else symbol
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{digits}f}"


def format_percentage(rate_percent: float, digits: int = 2) -> str:
    """`rate_percent` is already in percent, e.g. 12.345 -> '12.35%'."""
    return f"{rate_percent:.{digits}f}%"
