"""Holder for the currently published price catalog."""

import threading

from wallet_dashboard.domain.models import PriceCatalog


class PriceCatalogStore:
    """Publish price catalogs atomically, newest request first.

    Every refresh takes a ticket before fetching. A finished refresh only
    replaces the current catalog when no refresh issued after it has
    published already, so a slow earlier refresh never overwrites a faster
    later one.
    """

    def __init__(self, initial: PriceCatalog | None = None) -> None:
        self._lock = threading.Lock()
        self._catalog = initial if initial is not None else PriceCatalog.empty()
        self._issued = 0
        self._published = 0

    @property
    def current(self) -> PriceCatalog:
        return self._catalog

    @property
    def published_ticket(self) -> int:
        return self._published

    def begin_refresh(self) -> int:
        """Return a new refresh ticket, greater than all previous ones."""
        with self._lock:
            self._issued += 1
            return self._issued

    def publish(self, ticket: int, catalog: PriceCatalog) -> bool:
        """Swap in a catalog built by the refresh holding ``ticket``.

        Args:
            ticket: Ticket returned by begin_refresh.
            catalog: Freshly built catalog.

        Returns:
            bool: False when a later refresh already published.
        """
        with self._lock:
            if ticket <= self._published:
                return False
            self._catalog = catalog
            self._published = ticket
            return True


__all__ = ["PriceCatalogStore"]
