"""Application ports package."""

from .balance_source import BalanceSourceError, BalanceSourcePort
from .price_feed import PriceFeedError, PriceFeedPort

__all__ = [
    "BalanceSourceError",
    "BalanceSourcePort",
    "PriceFeedError",
    "PriceFeedPort",
]
