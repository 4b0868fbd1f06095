"""Composition root for wiring infrastructure adapters."""

from wallet_dashboard.application.ports.balance_source import (
    BalanceSourcePort,
)
from wallet_dashboard.application.ports.price_feed import PriceFeedPort
from wallet_dashboard.application.use_cases.catalog_store import (
    PriceCatalogStore,
)
from wallet_dashboard.application.use_cases.get_wallet_balances import (
    GetWalletBalancesUseCase,
)
from wallet_dashboard.application.use_cases.quote_swap import QuoteSwapUseCase
from wallet_dashboard.application.use_cases.refresh_price_catalog import (
    RefreshPriceCatalogUseCase,
)
from wallet_dashboard.domain.policies import (
    DEFAULT_PRIORITY_TABLE,
    ChainPriorityTable,
)
from wallet_dashboard.infrastructure.http_price_feed import HttpPriceFeed
from wallet_dashboard.infrastructure.json_balance_source import (
    JsonFileBalanceSource,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.infrastructure.settings import WalletSettings


def build_settings() -> WalletSettings:
    """Return settings sourced from the environment."""
    return WalletSettings.from_env()


def build_price_feed(settings: WalletSettings | None = None) -> PriceFeedPort:
    """Return the configured price feed adapter."""
    resolved = settings or build_settings()
    if resolved.prices_url is None:
        raise RuntimeError("Price feed requires a PRICES_API_URL value.")
    return HttpPriceFeed(resolved.prices_url, timeout=resolved.timeout_seconds)


def build_balance_source(
    settings: WalletSettings | None = None,
) -> BalanceSourcePort:
    """Return the configured balance snapshot adapter."""
    resolved = settings or build_settings()
    if resolved.balances_file is None:
        raise RuntimeError("Balance source requires a BALANCES_FILE value.")
    return JsonFileBalanceSource(resolved.balances_file)


def build_catalog_store() -> PriceCatalogStore:
    """Return an empty price catalog store."""
    return PriceCatalogStore()


def build_priority_table() -> ChainPriorityTable:
    """Return the shared chain priority table."""
    return DEFAULT_PRIORITY_TABLE


def build_refresh_price_catalog_use_case(
    store: PriceCatalogStore,
    settings: WalletSettings | None = None,
) -> RefreshPriceCatalogUseCase:
    """Return the price refresh use case publishing into ``store``."""
    return RefreshPriceCatalogUseCase(
        price_feed=build_price_feed(settings),
        store=store,
        logger=get_app_logger(),
    )


def build_get_wallet_balances_use_case(
    store: PriceCatalogStore,
    settings: WalletSettings | None = None,
) -> GetWalletBalancesUseCase:
    """Return the wallet ranking use case reading prices from ``store``."""
    resolved = settings or build_settings()
    return GetWalletBalancesUseCase(
        balance_source=build_balance_source(resolved),
        store=store,
        logger=get_app_logger(),
        priority_table=build_priority_table(),
        key_mode=resolved.key_mode,
        refresh_policy=resolved.refresh_policy,
    )


def build_quote_swap_use_case(store: PriceCatalogStore) -> QuoteSwapUseCase:
    """Return the swap quote use case reading prices from ``store``."""
    return QuoteSwapUseCase(store=store, logger=get_app_logger())


__all__ = [
    "build_settings",
    "build_price_feed",
    "build_balance_source",
    "build_catalog_store",
    "build_priority_table",
    "build_refresh_price_catalog_use_case",
    "build_get_wallet_balances_use_case",
    "build_quote_swap_use_case",
]
