"""Tests for the chain priority policy."""

import pytest

from wallet_dashboard.domain.constants import (
    DEFAULT_CHAIN_PRIORITIES,
    UNRANKED_PRIORITY,
)
from wallet_dashboard.domain.models import WalletBalance
from wallet_dashboard.domain.policies import (
    DEFAULT_PRIORITY_TABLE,
    ChainPriorityTable,
    ReconciliationKeyMode,
    is_displayable,
    reconciliation_key,
)
from wallet_dashboard.domain.policies import chain_priority


def test_default_priorities() -> None:
    assert [
        DEFAULT_PRIORITY_TABLE.priority(chain)
        for chain in ("Osmosis", "Ethereum", "Arbitrum", "Zilliqa", "Neo")
    ] == [100, 50, 30, 20, 20]


def test_unknown_chain_is_unranked() -> None:
    assert DEFAULT_PRIORITY_TABLE.priority("Bitcoin") == UNRANKED_PRIORITY
    assert DEFAULT_PRIORITY_TABLE.priority("osmosis") == UNRANKED_PRIORITY
    assert DEFAULT_PRIORITY_TABLE.is_ranked("Bitcoin") is False


def test_default_table_is_a_shared_singleton() -> None:
    from wallet_dashboard.domain import DEFAULT_PRIORITY_TABLE as exported

    assert exported is DEFAULT_PRIORITY_TABLE
    assert chain_priority.DEFAULT_PRIORITY_TABLE is DEFAULT_PRIORITY_TABLE


def test_table_is_immutable_copy_of_source() -> None:
    source = {"Neo": 1}
    table = ChainPriorityTable(source)
    source["Neo"] = 99

    assert table.priority("Neo") == 1
    with pytest.raises(TypeError):
        table.priorities["Neo"] = 5
    assert table.priority("Neo") == 1
    assert dict(DEFAULT_PRIORITY_TABLE.priorities) == dict(DEFAULT_CHAIN_PRIORITIES)


def test_is_displayable_requires_both_conditions() -> None:
    assert is_displayable(WalletBalance("ETH", 1, "Ethereum")) is True
    assert is_displayable(WalletBalance("ETH", 0, "Ethereum")) is False
    assert is_displayable(WalletBalance("BTC", 1, "Bitcoin")) is False


def test_reconciliation_key_modes() -> None:
    balance = WalletBalance("USDC", 1, "Ethereum")

    assert reconciliation_key(balance) == ("USDC", "Ethereum")
    assert reconciliation_key(balance, ReconciliationKeyMode.CURRENCY) == "USDC"
