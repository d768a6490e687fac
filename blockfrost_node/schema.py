"""
Node parameter schema generated from the operation table.

The host renders these property descriptors as the node form. Every field
property is shown only for the (category, operation) pairs whose dispatch
reads it, so the form and the dispatcher stay in lockstep.
"""

from __future__ import annotations

from typing import Any, Dict, List, Set, Tuple

from blockfrost_node.operations import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    FIELDS,
    REGISTRY,
    OperationDefinition,
)


def _category_property() -> Dict[str, Any]:
    return {
        "displayName": "Category",
        "name": "category",
        "type": "options",
        "noDataExpression": True,
        "options": [{"name": display, "value": value} for value, display in CATEGORIES],
        "default": DEFAULT_CATEGORY,
        "required": True,
    }


def _operation_property(category: str, operations: List[OperationDefinition]) -> Dict[str, Any]:
    return {
        "displayName": "Operation",
        "name": "operation",
        "type": "options",
        "noDataExpression": True,
        "displayOptions": {"show": {"category": [category]}},
        "options": [
            {
                "name": op.name,
                "value": op.operation,
                "description": f"{op.description} ({op.method} {op.path})",
            }
            for op in operations
        ],
        "default": operations[0].operation,
        "required": True,
    }


def _field_properties(category: str, operations: List[OperationDefinition]) -> List[Dict[str, Any]]:
    # (field, required) -> operations showing it, in table order
    grouped: Dict[Tuple[str, bool], List[str]] = {}
    for op in operations:
        for name in op.fields:
            grouped.setdefault((name, name in op.required), []).append(op.operation)

    properties: List[Dict[str, Any]] = []
    for (name, required), shown_for in grouped.items():
        definition = FIELDS[name]
        prop: Dict[str, Any] = {
            "displayName": definition.display_name,
            "name": name,
            "type": definition.type,
            "required": required,
            "default": definition.default,
            "displayOptions": {"show": {"category": [category], "operation": shown_for}},
            "description": definition.description,
        }
        if definition.options:
            prop["options"] = [{"name": label, "value": value} for label, value in definition.options]
        properties.append(prop)
    return properties


def build_node_properties() -> List[Dict[str, Any]]:
    """Return the full list of node properties: category, operations, then fields."""
    properties = [_category_property()]
    for category, operations in REGISTRY.items():
        ops = list(operations.values())
        properties.append(_operation_property(category, ops))
        properties.extend(_field_properties(category, ops))
    return properties


def visible_fields(properties: List[Dict[str, Any]], category: str, operation: str) -> Set[str]:
    """Field names the form shows for a (category, operation) pair."""
    names: Set[str] = set()
    for prop in properties:
        if prop["name"] in {"category", "operation"}:
            continue
        show = prop.get("displayOptions", {}).get("show", {})
        if category in show.get("category", []) and operation in show.get("operation", []):
            names.add(prop["name"])
    return names
