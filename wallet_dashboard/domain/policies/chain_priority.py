"""Chain priority and display policies for wallet balances."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from wallet_dashboard.domain.constants import (
    DEFAULT_CHAIN_PRIORITIES,
    UNRANKED_PRIORITY,
)
from wallet_dashboard.domain.models import WalletBalance


class ChainPriorityTable:
    """Immutable chain to priority lookup.

    Unknown chains map to ``UNRANKED_PRIORITY``, which marks them as not
    displayable.
    """

    __slots__ = ("_priorities",)

    def __init__(self, priorities: Mapping[str, int]) -> None:
        self._priorities = MappingProxyType(dict(priorities))

    @property
    def priorities(self) -> Mapping[str, int]:
        return self._priorities

    def priority(self, chain: str) -> int:
        """Return the priority of a chain.

        Args:
            chain: Blockchain identifier.

        Returns:
            int: Configured priority, or UNRANKED_PRIORITY when unknown.
        """
        return self._priorities.get(chain, UNRANKED_PRIORITY)

    def is_ranked(self, chain: str) -> bool:
        return self.priority(chain) > UNRANKED_PRIORITY

    def __repr__(self) -> str:
        return f"ChainPriorityTable({dict(self._priorities)!r})"


DEFAULT_PRIORITY_TABLE = ChainPriorityTable(DEFAULT_CHAIN_PRIORITIES)


class ReconciliationKeyMode(str, Enum):
    """How ranked balances are keyed for display reconciliation."""

    CURRENCY = "currency"
    COMPOSITE = "composite"


def is_displayable(
    balance: WalletBalance,
    table: ChainPriorityTable = DEFAULT_PRIORITY_TABLE,
) -> bool:
    """Return True when a balance belongs in the ranked wallet.

    Args:
        balance: Balance to evaluate.
        table: Chain priorities in effect.

    Returns:
        bool: True for a positive amount on a recognized chain.
    """
    return table.is_ranked(balance.chain) and balance.amount > 0


def reconciliation_key(
    balance: WalletBalance,
    mode: ReconciliationKeyMode = ReconciliationKeyMode.COMPOSITE,
) -> str | tuple[str, str]:
    if mode is ReconciliationKeyMode.CURRENCY:
        return balance.currency
    return (balance.currency, balance.chain)


__all__ = [
    "ChainPriorityTable",
    "DEFAULT_PRIORITY_TABLE",
    "ReconciliationKeyMode",
    "is_displayable",
    "reconciliation_key",
]
