"""Helpers for Decimal normalization and fixed-point formatting."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a feed or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_fixed(value, digits: int = 0) -> str:
    """Render a number with a fixed count of fractional digits.

    Halves round away from zero, so ``2.5`` renders as ``"3"``. Magnitudes
    of any size keep plain positional notation.

    Args:
        value: Number to render.
        digits: Fractional digits to keep.

    Returns:
        str: Text form without exponent notation. Values with no finite
        decimal form (NaN, infinities) render as ``str(value)``.
    """
    try:
        amount = coerce_decimal(value)
        if not amount.is_finite():
            return str(value)
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus the fraction
            ctx.prec = max(ctx.prec, amount.adjusted() + digits + 2)
            rounded = amount.quantize(
                Decimal(1).scaleb(-digits),
                rounding=ROUND_HALF_UP,
            )
    except InvalidOperation:
        return str(value)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:f}"


__all__ = ["coerce_decimal", "format_fixed"]
