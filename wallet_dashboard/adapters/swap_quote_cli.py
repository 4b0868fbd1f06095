"""CLI adapter quoting a currency swap at current feed prices."""

import os

from wallet_dashboard.infrastructure.container import (
    build_catalog_store,
    build_quote_swap_use_case,
    build_refresh_price_catalog_use_case,
    build_settings,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


def _parse_amount(value: str | None, logger) -> float | None:
    """Parse the amount to swap.

    Args:
        value: Raw amount string.
        logger: Logger used for warnings.

    Returns:
        float | None: Parsed amount or None when invalid.
    """
    if not value:
        logger.warning("SWAP_AMOUNT is required to quote a swap.")
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid amount '{value}'. Expected a number.")
        return None


def main() -> None:
    """Refresh prices and print a swap quote."""
    logger = get_app_logger()
    from_currency = os.getenv("SWAP_FROM", "ETH").strip()
    to_currency = os.getenv("SWAP_TO", "USDC").strip()
    amount = _parse_amount(os.getenv("SWAP_AMOUNT"), logger)
    if amount is None:
        return

    store = build_catalog_store()
    try:
        build_refresh_price_catalog_use_case(store, build_settings()).execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    quote = build_quote_swap_use_case(store).execute(
        from_currency,
        to_currency,
        amount,
    )
    if quote is None:
        print(f"No quote available for {from_currency} -> {to_currency}.")
        return
    print(
        f"{quote.from_amount} {quote.from_currency} = "
        f"{quote.display_to_amount} {quote.to_currency} "
        f"(rate {quote.rate:.6f})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
