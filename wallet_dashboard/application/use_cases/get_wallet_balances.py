"""Use case to produce the ranked wallet balances for display."""

from enum import Enum

from wallet_dashboard.application.ports.balance_source import (
    BalanceSourcePort,
)
from wallet_dashboard.application.use_cases.catalog_store import (
    PriceCatalogStore,
)
from wallet_dashboard.domain.models import RankedBalance, WalletBalance
from wallet_dashboard.domain.policies import (
    DEFAULT_PRIORITY_TABLE,
    ChainPriorityTable,
    ReconciliationKeyMode,
)
from wallet_dashboard.domain.services.ranking import (
    balance_from_record,
    rank_balances,
    revalue_balances,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class RefreshPolicy(str, Enum):
    """What invalidates a previously computed ranking.

    Fiat values always follow the published catalog. The policy only
    decides whether a new catalog also reruns filtering and ordering.
    """

    BALANCES = "balances"
    BALANCES_AND_PRICES = "balances_and_prices"


class GetWalletBalancesUseCase:
    """Rank the current balance snapshot against the published catalog."""

    def __init__(
        self,
        balance_source: BalanceSourcePort,
        store: PriceCatalogStore,
        logger=None,
        priority_table: ChainPriorityTable = DEFAULT_PRIORITY_TABLE,
        key_mode: ReconciliationKeyMode = ReconciliationKeyMode.COMPOSITE,
        refresh_policy: RefreshPolicy = RefreshPolicy.BALANCES,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_source: Port returning decoded balance records.
            store: Store holding the published price catalog.
            logger: Optional logger compatible with logging.Logger-like API.
            priority_table: Chain priorities used to filter and order.
            key_mode: Reconciliation key strategy for ranked balances.
            refresh_policy: Whether a price change alone reruns the ranking.
        """
        self._balance_source = balance_source
        self._store = store
        self._logger = logger or get_app_logger()
        self._priority_table = priority_table
        self._key_mode = key_mode
        self._refresh_policy = refresh_policy
        self._last_balances: tuple[WalletBalance, ...] | None = None
        self._last_catalog_ticket: int | None = None
        self._last_ranked: list[RankedBalance] = []

    def execute(self) -> list[RankedBalance]:
        """Return the ranked balances for the current snapshot.

        Returns:
            list[RankedBalance]: Filtered, ordered and valued balances.

        Raises:
            BalanceSourceError: If the snapshot cannot be retrieved.
        """
        records = self._balance_source.fetch_balance_records()
        balances = self._decode(records)
        ticket = self._store.published_ticket

        if self._is_unchanged(balances, ticket):
            self._logger.debug("Balance snapshot unchanged; reusing ranking")
            if ticket != self._last_catalog_ticket:
                self._last_ranked = revalue_balances(
                    self._last_ranked,
                    self._store.current,
                )
                self._last_catalog_ticket = ticket
            return list(self._last_ranked)

        ranked = rank_balances(
            balances,
            self._store.current,
            priority_table=self._priority_table,
            key_mode=self._key_mode,
            logger=self._logger,
        )
        self._last_balances = balances
        self._last_catalog_ticket = ticket
        self._last_ranked = ranked
        self._logger.info(
            f"Ranked {len(ranked)} of {len(balances)} wallet balances"
        )
        return list(ranked)

    def _decode(self, records) -> tuple[WalletBalance, ...]:
        balances: list[WalletBalance] = []
        malformed = 0
        for record in records:
            balance = balance_from_record(record)
            if balance is None:
                malformed += 1
                continue
            balances.append(balance)
        if malformed:
            self._logger.warning(f"Skipped {malformed} malformed balance records")
        return tuple(balances)

    def _is_unchanged(
        self,
        balances: tuple[WalletBalance, ...],
        ticket: int,
    ) -> bool:
        if self._last_balances is None or balances != self._last_balances:
            return False
        if self._refresh_policy is RefreshPolicy.BALANCES_AND_PRICES:
            return ticket == self._last_catalog_ticket
        return True


__all__ = ["GetWalletBalancesUseCase", "RefreshPolicy"]
