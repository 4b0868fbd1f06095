"""Domain models package."""

from .balances import RankedBalance, SwapQuote, WalletBalance
from .prices import PriceCatalog, PriceObservation

__all__ = [
    "PriceObservation",
    "PriceCatalog",
    "WalletBalance",
    "RankedBalance",
    "SwapQuote",
]
