"""Regression tests against the defective legacy wallet ranking.

The legacy variant kept non-positive amounts, referenced an undefined
priority variable in its filter, had no result for equal priorities and
keyed rows by list position. It lives here only as a negative fixture.
"""

import pytest

from wallet_dashboard.domain.models import PriceCatalog, WalletBalance
from wallet_dashboard.domain.policies import DEFAULT_PRIORITY_TABLE
from wallet_dashboard.domain.services.ranking import rank_balances


def _legacy_filter(balance: WalletBalance) -> bool:
    balance_priority = DEFAULT_PRIORITY_TABLE.priority(balance.chain)  # noqa: F841
    if lhs_priority > -99:  # noqa: F821
        if balance.amount <= 0:
            return True
    return False


def _legacy_filter_with_priority(balance: WalletBalance) -> bool:
    priority = DEFAULT_PRIORITY_TABLE.priority(balance.chain)
    return priority > -99 and balance.amount <= 0


def _legacy_compare(lhs: WalletBalance, rhs: WalletBalance):
    left = DEFAULT_PRIORITY_TABLE.priority(lhs.chain)
    right = DEFAULT_PRIORITY_TABLE.priority(rhs.chain)
    if left > right:
        return -1
    if right > left:
        return 1


BALANCES = [
    WalletBalance("USDC", 0, "Ethereum"),
    WalletBalance("ETH", 2, "Ethereum"),
    WalletBalance("ATOM", -1, "Osmosis"),
    WalletBalance("WETH", 3, "Ethereum"),
]


def test_legacy_filter_fails_on_undefined_variable() -> None:
    with pytest.raises(NameError):
        _legacy_filter(BALANCES[0])


def test_legacy_amount_test_is_inverted() -> None:
    legacy = [b.currency for b in BALANCES if _legacy_filter_with_priority(b)]
    ranked = [r.currency for r in rank_balances(BALANCES, PriceCatalog())]

    assert legacy == ["USDC", "ATOM"]
    assert ranked == ["ETH", "WETH"]
    assert not set(legacy) & set(ranked)


def test_legacy_comparator_has_no_result_for_ties() -> None:
    assert _legacy_compare(BALANCES[1], BALANCES[3]) is None
    ranked = rank_balances(BALANCES, PriceCatalog())
    assert [r.currency for r in ranked] == ["ETH", "WETH"]


def test_ranked_keys_are_values_not_positions() -> None:
    ranked = rank_balances(BALANCES, PriceCatalog())
    reordered = rank_balances(list(reversed(BALANCES)), PriceCatalog())

    legacy_keys = list(range(len(ranked)))
    assert [r.key for r in ranked] != legacy_keys
    assert {r.key: r.currency for r in ranked} == {
        r.key: r.currency for r in reordered
    }
