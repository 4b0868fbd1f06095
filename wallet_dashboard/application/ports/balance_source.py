"""Application port for wallet balance snapshots."""

from collections.abc import Mapping
from typing import Protocol


class BalanceSourceError(RuntimeError):
    """Raised when the balance snapshot cannot be retrieved."""


class BalanceSourcePort(Protocol):
    """Port returning the decoded wallet balance snapshot."""

    def fetch_balance_records(self) -> list[Mapping]:
        """Return records with ``currency``, ``amount`` and ``blockchain``."""


__all__ = ["BalanceSourcePort", "BalanceSourceError"]
