"""Blockfrost credential type: descriptor for the host and the parsed value used per execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from blockfrost_node.blockfrost_api.errors import InvalidInputError
from blockfrost_node.config import NETWORK_BASE_URLS, BlockfrostConfig, default_config
from blockfrost_node.operations.validators import is_blank

CREDENTIAL_NAME = "blockfrostApi"
DEFAULT_NETWORK = "mainnet"

CREDENTIAL_DESCRIPTION: Dict[str, Any] = {
    "name": CREDENTIAL_NAME,
    "displayName": "Blockfrost API",
    "properties": [
        {
            "displayName": "Project ID",
            "name": "projectId",
            "type": "string",
            "required": True,
            "default": "",
            "description": "Your Blockfrost Project ID from https://blockfrost.io",
        },
        {
            "displayName": "Network",
            "name": "network",
            "type": "options",
            "options": [
                {"name": "Mainnet", "value": "mainnet"},
                {"name": "Preprod", "value": "preprod"},
                {"name": "Preview", "value": "preview"},
            ],
            "default": DEFAULT_NETWORK,
            "required": True,
            "description": "The Cardano network to connect to",
        },
    ],
}


@dataclass(frozen=True, slots=True)
class BlockfrostCredentials:
    """Project ID and network for one execution."""

    project_id: str
    network: str = DEFAULT_NETWORK

    def __post_init__(self) -> None:
        if is_blank(self.project_id):
            raise InvalidInputError("Blockfrost project ID is required")
        if self.network not in NETWORK_BASE_URLS:
            raise InvalidInputError(f"Unsupported network: {self.network}")

    def __repr__(self) -> str:
        return f"BlockfrostCredentials(project_id='***', network={self.network!r})"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BlockfrostCredentials":
        """Build from the host credential mapping (``projectId``, ``network``)."""
        project_id = data.get("projectId")
        network = data.get("network") or DEFAULT_NETWORK
        return cls(project_id=str(project_id).strip() if project_id else "", network=str(network))

    @classmethod
    def from_config(cls, config: BlockfrostConfig | None = None) -> "BlockfrostCredentials":
        config = config or default_config
        return cls(project_id=config.project_id or "", network=config.network)

    def as_mapping(self) -> Dict[str, str]:
        """Host credential mapping, the inverse of ``from_mapping``."""
        return {"projectId": self.project_id, "network": self.network}
