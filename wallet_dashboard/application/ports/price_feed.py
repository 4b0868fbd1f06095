"""Application port for the external price feed."""

from collections.abc import Mapping
from typing import Protocol


class PriceFeedError(RuntimeError):
    """Raised when the price feed snapshot cannot be retrieved."""


class PriceFeedPort(Protocol):
    """Port returning the decoded price feed.

    Each record is expected to carry ``currency``, ``date`` and ``price``
    keys. Records are not validated by the port; malformed ones are
    excluded later by the domain services.
    """

    def fetch_price_records(self) -> list[Mapping]:
        """Return the decoded price feed records in feed order."""


__all__ = ["PriceFeedPort", "PriceFeedError"]
