"""The category/operation table, one module per category."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from blockfrost_node.blockfrost_api.errors import UnknownSelectionError

from . import (
    accounts,
    addresses,
    assets,
    blocks,
    epochs,
    governance,
    health,
    ledger,
    mempool,
    metadata,
    metrics,
    network,
    pools,
    scripts,
    transactions,
    utilities,
)
from . import validators
from .definitions import FIELDS, FieldDefinition, OperationDefinition

_MODULES = (
    accounts,
    addresses,
    assets,
    blocks,
    epochs,
    governance,
    ledger,
    mempool,
    metadata,
    network,
    pools,
    scripts,
    transactions,
    utilities,
    health,
    metrics,
)

CATEGORIES: List[Tuple[str, str]] = [module.CATEGORY for module in _MODULES]
DEFAULT_CATEGORY = "accounts"

REGISTRY: Dict[str, Dict[str, OperationDefinition]] = {
    module.CATEGORY[0]: {op.operation: op for op in module.OPERATIONS} for module in _MODULES
}


def get_operation(category: str, operation: str) -> OperationDefinition:
    """Resolve a (category, operation) pair or raise ``UnknownSelectionError``."""
    operations = REGISTRY.get(category)
    if operations is None:
        raise UnknownSelectionError(f"Category {category} not implemented yet")
    definition = operations.get(operation)
    if definition is None:
        raise UnknownSelectionError(f"Unknown operation: {operation}")
    return definition


def all_operations() -> List[OperationDefinition]:
    return [op for operations in REGISTRY.values() for op in operations.values()]


def fallback_methods() -> Dict[str, Optional[str]]:
    """Fallback operation keys mapped to the typed SDK method to prefer."""
    return {op.key: op.sdk_method for op in all_operations() if op.fallback}


__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "FIELDS",
    "FieldDefinition",
    "OperationDefinition",
    "REGISTRY",
    "all_operations",
    "fallback_methods",
    "get_operation",
    "validators",
]
