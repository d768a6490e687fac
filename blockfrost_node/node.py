"""
The Blockfrost node: description and ``execute`` contract consumed by the host.

``execute`` parses the credentials, builds the SDK gateway and the HTTP
client for the selected network, dispatches one operation and returns one
batch of output items. Every failure, whether rejected input or an upstream
error, is re-raised once as ``NodeApiError`` with a fixed prefix.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from blockfrost_node.blockfrost_api import (
    BlockfrostError,
    BlockfrostHttpClient,
    SdkGateway,
    create_sdk,
    describe_api_error,
)
from blockfrost_node.config import BlockfrostConfig, default_config
from blockfrost_node.credentials import CREDENTIAL_NAME, BlockfrostCredentials
from blockfrost_node.dispatcher import Dispatcher
from blockfrost_node.metrics import MetricsRecorder, default_metrics
from blockfrost_node.normalizer import to_output_items
from blockfrost_node.operations import DEFAULT_CATEGORY, REGISTRY, fallback_methods
from blockfrost_node.schema import build_node_properties

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Blockfrost API error: "

SdkFactory = Callable[[str, str], Any]
HttpClientFactory = Callable[[BlockfrostCredentials], BlockfrostHttpClient]


class NodeApiError(Exception):
    """The single error kind surfaced to the host for a failed execution."""


def build_description() -> Dict[str, Any]:
    return {
        "displayName": "Blockfrost",
        "name": "blockfrost",
        "icon": "file:blockfrost.svg",
        "group": ["transform"],
        "version": 1,
        "subtitle": '={{$parameter["category"]}} - {{$parameter["operation"]}}',
        "description": "Interact with Cardano blockchain via Blockfrost API",
        "defaults": {"name": "Blockfrost"},
        "inputs": ["main"],
        "outputs": ["main"],
        "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
        "properties": build_node_properties(),
    }


def _resolve_selection(parameters: Mapping[str, Any]) -> tuple[str, str]:
    category = parameters.get("category") or DEFAULT_CATEGORY
    operation = parameters.get("operation")
    if not operation and category in REGISTRY:
        # Same default the form shows for the category.
        operation = next(iter(REGISTRY[category]))
    return str(category), str(operation or "")


class BlockfrostNode:
    """Host-facing node. One instance may serve many concurrent executions."""

    description: Dict[str, Any] = build_description()

    def __init__(
        self,
        *,
        config: BlockfrostConfig | None = None,
        sdk_factory: SdkFactory = create_sdk,
        http_client_factory: Optional[HttpClientFactory] = None,
        metrics: MetricsRecorder = default_metrics,
    ) -> None:
        self.config = config or default_config
        self._sdk_factory = sdk_factory
        self._http_client_factory = http_client_factory or self._default_http_client
        self.metrics = metrics

    def _default_http_client(self, credentials: BlockfrostCredentials) -> BlockfrostHttpClient:
        return BlockfrostHttpClient(credentials.project_id, credentials.network, self.config)

    async def execute(
        self, credentials: Mapping[str, Any], parameters: Mapping[str, Any]
    ) -> List[List[Dict[str, Any]]]:
        """Run the selected operation and return ``[[{"json": item}, ...]]``."""
        category, operation = _resolve_selection(parameters)
        key = f"{category}.{operation}"
        http: Optional[BlockfrostHttpClient] = None
        try:
            parsed = BlockfrostCredentials.from_mapping(credentials)
            gateway = SdkGateway(
                self._sdk_factory(parsed.project_id, parsed.network), fallback_methods()
            )
            http = self._http_client_factory(parsed)
            dispatcher = Dispatcher(gateway, http, network=parsed.network, config=self.config)
            items = await dispatcher.dispatch(category, operation, parameters)
        except Exception as exc:
            message = str(exc) if isinstance(exc, BlockfrostError) else describe_api_error(exc)
            logger.warning(
                "operation=%s outcome=error error=%s",
                key,
                message,
                extra={"operation": key, "error": message},
            )
            self.metrics.record_operation(key, success=False)
            raise NodeApiError(f"{ERROR_PREFIX}{message}") from exc
        finally:
            if http is not None:
                await http.aclose()

        logger.info(
            "operation=%s outcome=success items=%d", key, len(items), extra={"operation": key}
        )
        self.metrics.record_operation(key, success=True)
        return [to_output_items(items)]
