"""Domain models for price observations and the resolved price catalog."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True)
class PriceObservation:
    """One timestamped price sample for a symbol.

    Attributes:
        symbol: Ticker of the asset.
        observed_at: Observation time, or None when the timestamp was unparsable.
        price: Observed price, or None when absent or invalid.
    """

    symbol: str
    observed_at: datetime | None
    price: float | None


class PriceCatalog(Mapping[str, float]):
    """Read-only mapping of symbol to its current price.

    Instances are rebuilt wholesale on every refresh and never mutated.
    """

    __slots__ = ("_prices", "_skipped_count")

    def __init__(
        self,
        prices: Mapping[str, float] | None = None,
        skipped_count: int = 0,
    ) -> None:
        self._prices = MappingProxyType(dict(prices or {}))
        self._skipped_count = skipped_count

    @classmethod
    def empty(cls) -> "PriceCatalog":
        return cls()

    @property
    def skipped_count(self) -> int:
        """Number of observations that did not participate in the build."""
        return self._skipped_count

    def lookup(self, symbol: str) -> float | None:
        """Return the price for a symbol, or None when unknown."""
        return self._prices.get(symbol)

    def symbols(self) -> list[str]:
        """Return the priced symbols in sorted order."""
        return sorted(self._prices)

    def __getitem__(self, symbol: str) -> float:
        return self._prices[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return (
            f"PriceCatalog({dict(self._prices)!r}, "
            f"skipped_count={self._skipped_count})"
        )


__all__ = ["PriceObservation", "PriceCatalog"]
