"""Domain services turning raw wallet balances into a ranked display list."""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from logging import Logger

from wallet_dashboard.domain.models import (
    PriceCatalog,
    RankedBalance,
    WalletBalance,
)
from wallet_dashboard.domain.policies import (
    DEFAULT_PRIORITY_TABLE,
    ChainPriorityTable,
    ReconciliationKeyMode,
    is_displayable,
    reconciliation_key,
)
from wallet_dashboard.domain.services.normalization import (
    coerce_finite_float,
    normalize_chain,
    normalize_symbol,
)
from wallet_dashboard.utils.decimal_utils import format_fixed


def balance_from_record(record: Mapping) -> WalletBalance | None:
    """Decode one balance snapshot record.

    Args:
        record: Mapping with ``currency``, ``amount`` and ``blockchain`` keys.

    Returns:
        WalletBalance | None: Balance, or None when the record is malformed.
    """
    if not isinstance(record, Mapping):
        return None
    currency = normalize_symbol(record.get("currency"))
    amount = coerce_finite_float(record.get("amount"))
    if currency is None or amount is None:
        return None
    return WalletBalance(
        currency=currency,
        amount=amount,
        chain=normalize_chain(record.get("blockchain")),
    )


def rank_balances(
    balances: Iterable[WalletBalance],
    catalog: PriceCatalog,
    *,
    priority_table: ChainPriorityTable = DEFAULT_PRIORITY_TABLE,
    key_mode: ReconciliationKeyMode = ReconciliationKeyMode.COMPOSITE,
    logger: Logger | None = None,
) -> list[RankedBalance]:
    """Filter, order and value balances for display.

    Only positive balances on recognized chains are kept. They are ordered
    by descending chain priority; equal priorities keep their input order.

    Args:
        balances: Raw balances in snapshot order.
        catalog: Current prices used for fiat valuation.
        priority_table: Chain priorities in effect.
        key_mode: Reconciliation key strategy.
        logger: Optional logger used for diagnostics.

    Returns:
        list[RankedBalance]: Display-ready balances.
    """
    balances = list(balances)
    displayable = [
        balance
        for balance in balances
        if is_displayable(balance, priority_table)
    ]
    ordered = sorted(
        displayable,
        key=lambda balance: -priority_table.priority(balance.chain),
    )

    ranked = [
        _to_ranked(balance, catalog, priority_table, key_mode)
        for balance in ordered
    ]

    if logger is not None:
        excluded = len(balances) - len(ranked)
        if excluded:
            logger.debug(
                f"Excluded {excluded} balances with a non-positive amount "
                "or an unranked chain"
            )
        _warn_on_duplicate_keys(ranked, logger)
    return ranked


def revalue_balances(
    ranked: Iterable[RankedBalance],
    catalog: PriceCatalog,
) -> list[RankedBalance]:
    """Recompute fiat values of ranked balances against another catalog.

    Order, display amounts and keys are kept as they are.

    Args:
        ranked: Balances produced by rank_balances.
        catalog: Prices to value them with.

    Returns:
        list[RankedBalance]: Same balances with refreshed fiat values.
    """
    return [
        replace(item, fiat_value=_fiat_value(item.currency, item.amount, catalog))
        for item in ranked
    ]


def _fiat_value(currency: str, amount: float, catalog: PriceCatalog) -> float:
    price = catalog.lookup(currency)
    if price is None:
        price = 0.0
    return price * amount


def _to_ranked(
    balance: WalletBalance,
    catalog: PriceCatalog,
    priority_table: ChainPriorityTable,
    key_mode: ReconciliationKeyMode,
) -> RankedBalance:
    return RankedBalance(
        currency=balance.currency,
        amount=balance.amount,
        chain=balance.chain,
        priority=priority_table.priority(balance.chain),
        display_amount=format_fixed(balance.amount),
        fiat_value=_fiat_value(balance.currency, balance.amount, catalog),
        key=reconciliation_key(balance, key_mode),
    )


def _warn_on_duplicate_keys(
    ranked: list[RankedBalance],
    logger: Logger,
) -> None:
    seen: set = set()
    duplicates: set = set()
    for item in ranked:
        if item.key in seen:
            duplicates.add(item.key)
        seen.add(item.key)
    if duplicates:
        logger.warning(
            "Ranked balances share reconciliation keys "
            f"{sorted(duplicates, key=str)}; use composite keys"
        )


__all__ = ["balance_from_record", "rank_balances", "revalue_balances"]
