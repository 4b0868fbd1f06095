"""Domain services for converting amounts between priced currencies."""

import math

from wallet_dashboard.domain.models import PriceCatalog, SwapQuote
from wallet_dashboard.utils.decimal_utils import format_fixed


QUOTE_DIGITS = 6


def exchange_rate(
    catalog: PriceCatalog,
    from_currency: str,
    to_currency: str,
) -> float | None:
    """Return how many ``to_currency`` units one ``from_currency`` buys.

    Args:
        catalog: Current prices.
        from_currency: Currency being sold.
        to_currency: Currency being bought.

    Returns:
        float | None: Rate, or None when either price is unknown or zero.
    """
    from_price = catalog.lookup(from_currency)
    to_price = catalog.lookup(to_currency)
    if not from_price or not to_price:
        return None
    return from_price / to_price


def quote_swap(
    catalog: PriceCatalog,
    from_currency: str,
    to_currency: str,
    amount: float,
) -> SwapQuote | None:
    """Quote a swap of ``amount`` units at current catalog prices.

    Args:
        catalog: Current prices.
        from_currency: Currency being sold.
        to_currency: Currency being bought.
        amount: Positive quantity of ``from_currency``.

    Returns:
        SwapQuote | None: Quote, or None for an invalid amount or unknown rate.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    rate = exchange_rate(catalog, from_currency, to_currency)
    if rate is None:
        return None
    to_amount = amount * rate
    return SwapQuote(
        from_currency=from_currency,
        to_currency=to_currency,
        from_amount=float(amount),
        rate=rate,
        to_amount=to_amount,
        display_to_amount=format_fixed(to_amount, QUOTE_DIGITS),
    )


__all__ = ["QUOTE_DIGITS", "exchange_rate", "quote_swap"]
