"""
Thin HTTP client for Blockfrost endpoints the vendor SDK does not cover.

Each call sends one request built by the dispatcher and maps Blockfrost errors
to internal exceptions that the node layer turns into a single error message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from blockfrost_node.blockfrost_api.errors import (
    BlockfrostApiError,
    InvalidInputError,
    ServiceUnreachableError,
    error_for_status,
)
from blockfrost_node.config import NETWORK_BASE_URLS, BlockfrostConfig, default_config

logger = logging.getLogger(__name__)

PROJECT_ID_HEADER = "project_id"
_NOT_JSON = object()


def resolve_base_url(network: str) -> str:
    """Return the Blockfrost API root for ``network``; unknown networks are rejected."""
    try:
        return NETWORK_BASE_URLS[network]
    except (KeyError, TypeError):
        raise InvalidInputError(f"Unsupported network: {network}") from None


@dataclass(slots=True)
class EndpointTarget:
    """Fully resolved request for one Blockfrost endpoint."""

    path: str
    method: str = "GET"
    query_params: Dict[str, Any] = field(default_factory=dict)
    body: Optional[str] = None
    content_type: Optional[str] = None

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}{self.path}"


class BlockfrostHttpClient:
    """Async client sending dispatcher-built requests to one Blockfrost network."""

    def __init__(
        self,
        project_id: str,
        network: str,
        config: BlockfrostConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self.project_id = project_id
        self.base_url = resolve_base_url(network)
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs: Dict[str, Any] = {}
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            self._client = httpx.AsyncClient(**kwargs)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self, target: EndpointTarget) -> Dict[str, str]:
        headers = {PROJECT_ID_HEADER: self.project_id}
        if target.content_type:
            headers["Content-Type"] = target.content_type
        return headers

    def _map_error(self, status_code: int, data: Any) -> BlockfrostApiError:
        code: Optional[str] = None
        message: Optional[str] = None
        if isinstance(data, dict):
            raw_error = data.get("error")
            if isinstance(raw_error, str):
                code = raw_error
            raw_message = data.get("message")
            if isinstance(raw_message, str):
                message = raw_message
        return error_for_status(status_code, code=code, message=message)

    def _process_response(self, response: httpx.Response) -> Any:
        try:
            data: Any = response.json()
        except ValueError:
            data = _NOT_JSON

        if response.status_code >= 400:
            raise self._map_error(response.status_code, data)

        if data is _NOT_JSON:
            # Non-JSON success bodies are passed through as text.
            return response.text
        return data

    async def send(self, target: EndpointTarget) -> Any:
        """Perform the single request described by ``target``."""
        client = await self._get_client()
        headers = self._build_headers(target)
        logger.debug("Blockfrost request %s %s", target.method, target.path)
        try:
            response = await client.request(
                target.method,
                target.url(self.base_url),
                params=target.query_params or None,
                content=target.body,
                headers=headers,
            )
        except httpx.RequestError as exc:
            logger.warning("Blockfrost unreachable for path %s", target.path)
            raise ServiceUnreachableError(f"Blockfrost unreachable: {exc}") from exc
        return self._process_response(response)
