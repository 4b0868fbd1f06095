"""Domain constants for wallet ranking."""

from types import MappingProxyType

UNRANKED_PRIORITY = -99

DEFAULT_CHAIN_PRIORITIES = MappingProxyType(
    {
        "Osmosis": 100,
        "Ethereum": 50,
        "Arbitrum": 30,
        "Zilliqa": 20,
        "Neo": 20,
    }
)


__all__ = ["UNRANKED_PRIORITY", "DEFAULT_CHAIN_PRIORITIES"]
