"""Application use cases package."""

from .catalog_store import PriceCatalogStore
from .get_wallet_balances import GetWalletBalancesUseCase, RefreshPolicy
from .quote_swap import QuoteSwapUseCase
from .refresh_price_catalog import RefreshPriceCatalogUseCase, RefreshResult

__all__ = [
    "PriceCatalogStore",
    "GetWalletBalancesUseCase",
    "RefreshPolicy",
    "QuoteSwapUseCase",
    "RefreshPriceCatalogUseCase",
    "RefreshResult",
]
