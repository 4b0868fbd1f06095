"""File adapter for JSON wallet balance snapshots."""

from collections.abc import Mapping
import json
from pathlib import Path

from wallet_dashboard.application.ports.balance_source import (
    BalanceSourceError,
)


class JsonFileBalanceSource:
    """Balance snapshot stored as a JSON document.

    The document is either a list of balance records or an object with a
    ``balances`` list.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def fetch_balance_records(self) -> list[Mapping]:
        """Read the snapshot from disk.

        Returns:
            list[Mapping]: Balance records in document order.

        Raises:
            BalanceSourceError: If the file is missing or not a valid snapshot.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise BalanceSourceError(
                f"Cannot read balances file {self._path}: {exc}"
            ) from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise BalanceSourceError(
                f"Balances file {self._path} is not valid JSON"
            ) from exc
        if isinstance(payload, dict):
            payload = payload.get("balances")
        if not isinstance(payload, list):
            raise BalanceSourceError(
                f"Balances file {self._path} does not hold a balance list"
            )
        return payload


__all__ = ["JsonFileBalanceSource"]
