"""Use case to refresh the price catalog from the price feed."""

from dataclasses import dataclass

from wallet_dashboard.application.ports.price_feed import PriceFeedPort
from wallet_dashboard.application.use_cases.catalog_store import (
    PriceCatalogStore,
)
from wallet_dashboard.domain.models import PriceCatalog
from wallet_dashboard.domain.services.prices import (
    build_price_catalog_from_records,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of a price catalog refresh.

    Attributes:
        catalog: Catalog built by this refresh.
        published: False when a later refresh had already published.
        skipped_count: Feed records that did not participate.
    """

    catalog: PriceCatalog
    published: bool
    skipped_count: int


class RefreshPriceCatalogUseCase:
    """Fetch the price feed and publish a rebuilt catalog."""

    def __init__(
        self,
        price_feed: PriceFeedPort,
        store: PriceCatalogStore,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            price_feed: Port returning decoded price records.
            store: Store holding the published catalog.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._price_feed = price_feed
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> RefreshResult:
        """Rebuild the catalog from a fresh feed snapshot.

        Returns:
            RefreshResult: Built catalog and whether it was published.

        Raises:
            PriceFeedError: If the feed cannot be retrieved.
        """
        ticket = self._store.begin_refresh()
        records = self._price_feed.fetch_price_records()
        catalog = build_price_catalog_from_records(records, self._logger)
        published = self._store.publish(ticket, catalog)

        if published:
            self._logger.info(
                f"Price catalog refreshed: symbols={len(catalog)}, "
                f"skipped={catalog.skipped_count}"
            )
        else:
            self._logger.warning(
                f"Discarded stale price catalog from refresh #{ticket}"
            )
        return RefreshResult(
            catalog=catalog,
            published=published,
            skipped_count=catalog.skipped_count,
        )


__all__ = ["RefreshPriceCatalogUseCase", "RefreshResult"]
