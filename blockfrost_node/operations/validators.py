"""Shared validation helpers for Blockfrost node parameters."""

from __future__ import annotations

import json
from typing import Any, List, Optional

from blockfrost_node.blockfrost_api.errors import InvalidInputError

STAKE_ADDRESS_PREFIX = "stake1"
STAKE_ADDRESS_LENGTH = 59


def is_valid_stake_address(address: Optional[str]) -> bool:
    """Superficial check for mainnet Bech32 stake addresses (prefix and length only)."""
    if not address or not isinstance(address, str):
        return False
    return address.startswith(STAKE_ADDRESS_PREFIX) and len(address) == STAKE_ADDRESS_LENGTH


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def coerce_int(value: Any, field: str) -> int:
    """Parse an integer field; floats are accepted only when they are whole."""
    if isinstance(value, bool):
        raise InvalidInputError(f"Invalid {field}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise InvalidInputError(f"Invalid {field}: {value!r}")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid {field}: {value!r}") from None


def require_non_negative(value: int, field: str) -> int:
    if value < 0:
        raise InvalidInputError(f"{field} must not be negative")
    return value


def parse_utxo_set(value: Any) -> List[Any]:
    """Parse the additional UTXO set, given either as JSON text or an already decoded list."""
    if is_blank(value):
        return []
    if isinstance(value, list):
        return value
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        raise InvalidInputError("Additional UTXOs must be a JSON array") from None
    if not isinstance(parsed, list):
        raise InvalidInputError("Additional UTXOs must be a JSON array")
    return parsed
