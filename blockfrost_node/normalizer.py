"""Coerce Blockfrost responses into the list-of-objects shape emitted by the node."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List


def _to_plain(value: Any) -> Any:
    # SDK namespace objects become plain dicts.
    if isinstance(value, SimpleNamespace):
        return {key: _to_plain(item) for key, item in vars(value).items()}
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


def normalize_response(value: Any) -> List[Any]:
    """
    Shape a response for output.

    Lists pass through, objects become a one-element list and anything else
    (string, number, null) is wrapped as ``[{"result": value}]``. Applying it
    to an already normalized list of objects returns an equal list.
    """
    plain = _to_plain(value)
    if isinstance(plain, list):
        return plain
    if isinstance(plain, dict):
        return [plain]
    return [{"result": plain}]


def to_output_items(values: List[Any]) -> List[Dict[str, Any]]:
    """Wrap normalized values as host output items."""
    return [{"json": value} for value in values]
