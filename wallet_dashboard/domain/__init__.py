"""Domain package for wallet pricing and ranking rules."""

from .constants import DEFAULT_CHAIN_PRIORITIES, UNRANKED_PRIORITY
from .models import (
    PriceCatalog,
    PriceObservation,
    RankedBalance,
    SwapQuote,
    WalletBalance,
)
from .policies import (
    DEFAULT_PRIORITY_TABLE,
    ChainPriorityTable,
    ReconciliationKeyMode,
    is_displayable,
    reconciliation_key,
)
from .services import (
    balance_from_record,
    build_price_catalog,
    build_price_catalog_from_records,
    exchange_rate,
    observation_from_record,
    quote_swap,
    rank_balances,
)

__all__ = [
    "DEFAULT_CHAIN_PRIORITIES",
    "UNRANKED_PRIORITY",
    "PriceCatalog",
    "PriceObservation",
    "RankedBalance",
    "SwapQuote",
    "WalletBalance",
    "ChainPriorityTable",
    "DEFAULT_PRIORITY_TABLE",
    "ReconciliationKeyMode",
    "is_displayable",
    "reconciliation_key",
    "balance_from_record",
    "build_price_catalog",
    "build_price_catalog_from_records",
    "exchange_rate",
    "observation_from_record",
    "quote_swap",
    "rank_balances",
]
