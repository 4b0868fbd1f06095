"""HTTP adapter for the JSON price feed."""

from collections.abc import Mapping

import requests

from wallet_dashboard.application.ports.price_feed import PriceFeedError


class HttpPriceFeed:
    """Price feed served as a JSON list over HTTP."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            url: Full URL of the ``prices.json`` document.
            timeout: Request timeout in seconds.
            session: Optional session to reuse connections.
        """
        self.url = url
        self.timeout = float(timeout)
        self.sess = session or requests.Session()

    def fetch_price_records(self) -> list[Mapping]:
        """Download and decode the feed.

        Returns:
            list[Mapping]: Feed records in document order.

        Raises:
            PriceFeedError: On transport errors, HTTP errors or a body that
                is not a JSON list.
        """
        try:
            response = self.sess.get(self.url, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise PriceFeedError(
                f"Failed to fetch prices from {self.url}: {exc}"
            ) from exc
        if not response.ok:
            raise PriceFeedError(
                f"Failed to fetch prices from {self.url}: "
                f"HTTP {response.status_code}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise PriceFeedError(
                f"Price feed at {self.url} is not valid JSON"
            ) from exc
        if not isinstance(payload, list):
            raise PriceFeedError(
                f"Price feed at {self.url} is not a JSON list"
            )
        return payload


__all__ = ["HttpPriceFeed"]
