"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from wallet_dashboard.application.use_cases.get_wallet_balances import (
    RefreshPolicy,
)
from wallet_dashboard.domain.policies import ReconciliationKeyMode
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.utils.utils import get_project_root


DEFAULT_TIMEOUT_SECONDS = 10.0
PRICES_PATH = "prices.json"


@dataclass(frozen=True)
class WalletSettings:
    """Settings for the price feed and the wallet ranking.

    Attributes:
        prices_api_url: Base URL serving ``prices.json``.
        timeout_seconds: HTTP timeout for the price feed.
        balances_file: Optional path to the JSON balance snapshot.
        key_mode: Reconciliation key strategy for ranked balances.
        refresh_policy: What invalidates a computed ranking.
    """

    prices_api_url: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    balances_file: Optional[Path] = None
    key_mode: ReconciliationKeyMode = ReconciliationKeyMode.COMPOSITE
    refresh_policy: RefreshPolicy = RefreshPolicy.BALANCES

    @property
    def prices_url(self) -> Optional[str]:
        """Return the full price feed URL when a base URL is configured."""
        if not self.prices_api_url:
            return None
        return f"{self.prices_api_url.rstrip('/')}/{PRICES_PATH}"

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables.

        Returns:
            WalletSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        prices_api_url = os.getenv("PRICES_API_URL", "").strip() or None
        raw_balances = os.getenv("BALANCES_FILE")
        if raw_balances:
            balances_file = cls._normalize_path(raw_balances, logger=logger)
        else:
            balances_file = cls._default_balances_file(logger=logger)
        return cls(
            prices_api_url=prices_api_url,
            timeout_seconds=cls._parse_timeout(
                os.getenv("PRICES_TIMEOUT_SECONDS"),
                logger=logger,
            ),
            balances_file=balances_file,
            key_mode=cls._parse_choice(
                "WALLET_KEY_MODE",
                ReconciliationKeyMode,
                ReconciliationKeyMode.COMPOSITE,
                logger=logger,
            ),
            refresh_policy=cls._parse_choice(
                "WALLET_REFRESH_POLICY",
                RefreshPolicy,
                RefreshPolicy.BALANCES,
                logger=logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the balance snapshot path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Balances file does not exist at {path}")
        return path

    @staticmethod
    def _default_balances_file(logger) -> Path | None:
        """Return a default balance snapshot when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single snapshot is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set BALANCES_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_timeout(raw: str | None, logger) -> float:
        if not raw:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            value = 0.0
        if value <= 0:
            logger.warning(
                f"Invalid PRICES_TIMEOUT_SECONDS '{raw}'. "
                f"Using {DEFAULT_TIMEOUT_SECONDS}."
            )
            return DEFAULT_TIMEOUT_SECONDS
        return value

    @staticmethod
    def _parse_choice(name: str, choices, default, logger):
        raw = os.getenv(name, "").strip().lower()
        if not raw:
            return default
        try:
            return choices(raw)
        except ValueError:
            allowed = ", ".join(choice.value for choice in choices)
            logger.warning(
                f"Invalid {name} '{raw}'. Expected one of: {allowed}."
            )
            return default


__all__ = ["WalletSettings"]
