"""Domain models for wallet balances."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WalletBalance:
    """Raw balance held on a chain.

    Attributes:
        currency: Ticker of the held asset.
        amount: Held quantity, any sign.
        chain: Blockchain the balance lives on.
    """

    currency: str
    amount: float
    chain: str


@dataclass(frozen=True)
class RankedBalance:
    """Display-ready balance produced by the ranking service.

    Attributes:
        currency: Ticker of the held asset.
        amount: Held quantity, always positive.
        chain: Blockchain the balance lives on.
        priority: Chain priority used for ordering.
        display_amount: Amount rounded to an integer text form.
        fiat_value: Amount valued with the catalog price, 0.0 when unpriced.
        key: Stable reconciliation key, either the currency or
            the (currency, chain) pair.
    """

    currency: str
    amount: float
    chain: str
    priority: int
    display_amount: str
    fiat_value: float
    key: str | tuple[str, str]


@dataclass(frozen=True)
class SwapQuote:
    """Conversion of an amount from one currency into another."""

    from_currency: str
    to_currency: str
    from_amount: float
    rate: float
    to_amount: float
    display_to_amount: str


__all__ = ["WalletBalance", "RankedBalance", "SwapQuote"]
