"""Use case to quote a currency swap at published prices."""

from wallet_dashboard.application.use_cases.catalog_store import (
    PriceCatalogStore,
)
from wallet_dashboard.domain.models import SwapQuote
from wallet_dashboard.domain.services.fx import quote_swap
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class QuoteSwapUseCase:
    """Convert an amount between two currencies of the current catalog."""

    def __init__(self, store: PriceCatalogStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        from_currency: str,
        to_currency: str,
        amount: float,
    ) -> SwapQuote | None:
        """Return a swap quote, or None when no quote is possible.

        Args:
            from_currency: Currency being sold.
            to_currency: Currency being bought.
            amount: Positive quantity of ``from_currency``.

        Returns:
            SwapQuote | None: Quote at the published prices.
        """
        quote = quote_swap(self._store.current, from_currency, to_currency, amount)
        if quote is None:
            self._logger.warning(
                f"Cannot quote {amount} {from_currency} to {to_currency}"
            )
            return None
        self._logger.info(
            f"Quoted {amount} {from_currency} -> "
            f"{quote.display_to_amount} {to_currency}"
        )
        return quote


__all__ = ["QuoteSwapUseCase"]
