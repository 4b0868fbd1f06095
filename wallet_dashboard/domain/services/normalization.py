"""Domain normalization helpers for raw feed values."""

from decimal import Decimal
import math
from numbers import Real


def normalize_symbol(symbol) -> str | None:
    """Normalize a currency ticker.

    Args:
        symbol: Raw ticker value from a feed record.

    Returns:
        str | None: Stripped ticker, or None when empty or not text.
    """
    if not isinstance(symbol, str):
        return None
    cleaned = symbol.strip()
    return cleaned or None


def normalize_chain(chain) -> str:
    """Normalize a blockchain identifier.

    Args:
        chain: Raw chain value from a balance record.

    Returns:
        str: Stripped chain name, empty when missing.
    """
    if not isinstance(chain, str):
        return ""
    return chain.strip()


def coerce_finite_float(value) -> float | None:
    """Convert numbers and numeric strings to a finite float.

    Args:
        value: Raw numeric value.

    Returns:
        float | None: Parsed value, or None for booleans, NaN, infinities
        and anything unparsable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


__all__ = ["normalize_symbol", "normalize_chain", "coerce_finite_float"]
