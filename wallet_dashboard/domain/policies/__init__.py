"""Domain policies package."""

from .chain_priority import (
    DEFAULT_PRIORITY_TABLE,
    ChainPriorityTable,
    ReconciliationKeyMode,
    is_displayable,
    reconciliation_key,
)

__all__ = [
    "ChainPriorityTable",
    "DEFAULT_PRIORITY_TABLE",
    "ReconciliationKeyMode",
    "is_displayable",
    "reconciliation_key",
]
