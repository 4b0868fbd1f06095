"""Domain services package."""

from .fx import exchange_rate, quote_swap
from .normalization import coerce_finite_float, normalize_chain, normalize_symbol
from .prices import (
    build_price_catalog,
    build_price_catalog_from_records,
    observation_from_record,
    parse_price,
    parse_timestamp,
)
from .ranking import balance_from_record, rank_balances, revalue_balances

__all__ = [
    "build_price_catalog",
    "build_price_catalog_from_records",
    "observation_from_record",
    "parse_price",
    "parse_timestamp",
    "balance_from_record",
    "rank_balances",
    "revalue_balances",
    "exchange_rate",
    "quote_swap",
    "coerce_finite_float",
    "normalize_chain",
    "normalize_symbol",
]
