"""
Configuration helpers for the Blockfrost node.

This module centralizes network selection, project ID loading, the optional
HTTP timeout and logging settings. No secrets are stored in the repository; the
project ID is read from environment or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

# Network settings
DEFAULT_NETWORK = os.getenv("BLOCKFROST_NETWORK", "mainnet")
NETWORK_BASE_URLS: Dict[str, str] = {
    "mainnet": "https://cardano-mainnet.blockfrost.io/api/v0",
    "preprod": "https://cardano-preprod.blockfrost.io/api/v0",
    "preview": "https://cardano-preview.blockfrost.io/api/v0",
}


def _load_timeout() -> Optional[float]:
    raw_timeout = os.getenv("BLOCKFROST_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return None
    return None


# None keeps the HTTP client's own default.
DEFAULT_TIMEOUT = _load_timeout()

# Project ID handling
PROJECT_ID_ENV_VAR = "BLOCKFROST_PROJECT_ID"
PROJECT_ID_FILE_ENV_VAR = "BLOCKFROST_PROJECT_ID_FILE"
DEFAULT_PROJECT_ID_FILE = "project_id.txt"

# Pagination defaults forwarded to Blockfrost
DEFAULT_COUNT = 100
DEFAULT_PAGE = 1
DEFAULT_ORDER = "asc"

LOG_LEVEL = os.getenv("BLOCKFROST_NODE_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("BLOCKFROST_NODE_LOG_FORMAT", "json")  # json or plain


def load_project_id() -> Optional[str]:
    """
    Load the Blockfrost project ID from environment or a local file.

    Returns:
        The project ID if available, otherwise None. The value is never logged.
    """
    env_key = os.getenv(PROJECT_ID_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(PROJECT_ID_FILE_ENV_VAR, DEFAULT_PROJECT_ID_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


@dataclass(slots=True)
class BlockfrostConfig:
    """Runtime configuration for Blockfrost access."""

    project_id: Optional[str] = load_project_id()
    network: str = DEFAULT_NETWORK
    timeout: Optional[float] = DEFAULT_TIMEOUT
    default_count: int = DEFAULT_COUNT
    default_page: int = DEFAULT_PAGE
    default_order: str = DEFAULT_ORDER
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


default_config = BlockfrostConfig()
