"""CLI adapter printing the ranked wallet with fiat values.

This module refreshes the price catalog, ranks the configured balance
snapshot and prints one line per displayed balance.
"""

from wallet_dashboard.infrastructure.container import (
    build_catalog_store,
    build_get_wallet_balances_use_case,
    build_refresh_price_catalog_use_case,
    build_settings,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a price refresh and print the ranked wallet."""
    logger = get_app_logger()
    settings = build_settings()
    store = build_catalog_store()
    try:
        refresh = build_refresh_price_catalog_use_case(store, settings)
        wallet = build_get_wallet_balances_use_case(store, settings)
        refresh.execute()
        ranked = wallet.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    total = 0.0
    for balance in ranked:
        total += balance.fiat_value
        print(
            f"{balance.currency:<8} {balance.chain:<10} "
            f"{balance.display_amount:>14} {balance.fiat_value:>16.2f}"
        )
    print(f"Total ({len(ranked)} balances): {total:.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
