"""Display helpers for amounts in issue and change messages."""

from typing import Optional


def format_amount(amount: float, currency: Optional[str] = None) -> str:
    """
    Format an amount with thousands separators and an optional currency label.

    Trailing zero decimals are dropped: 1200.0 -> "1,200", 12.5 -> "12.5".
    """
    text = f"{amount:,.2f}".rstrip("0").rstrip(".")
    if currency:
        return f"{currency} {text}"
    return text
