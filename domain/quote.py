"""
domain/quote.py

Quote record and the price-change color rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PriceChangeRole(Enum):
    """Color role for the price-change field."""

    ALERT = "alert"
    NEUTRAL = "neutral"
    POSITIVE = "positive"


@dataclass(frozen=True)
class Quote:
    """Point-in-time price record for one symbol."""

    company_name: str
    symbol: str
    price: float
    price_change: float

    @property
    def change_role(self) -> PriceChangeRole:
        return price_change_role(self.price_change)


def price_change_role(change: float) -> PriceChangeRole:
    """Negative -> ALERT, exactly zero -> NEUTRAL, positive -> POSITIVE."""
    if change < 0:
        return PriceChangeRole.ALERT
    elif change == 0:
        return PriceChangeRole.NEUTRAL
    return PriceChangeRole.POSITIVE


def format_decimal(value: float) -> str:
    """Render a price the way the quote labels show it (150.0, -2.5)."""
    return str(float(value))
