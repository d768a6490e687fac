"""
Gateway around the vendor Blockfrost SDK.

SDK-backed operations call one typed SDK method. Fallback operations (endpoints
the SDK may not expose) get a route chosen once, when the gateway is built:
the typed SDK method when present, else the SDK's generic ``request`` or
``_request`` method, else a route that fails with ``MissingCapabilityError``.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from blockfrost import ApiError, ApiUrls, BlockFrostApi

from blockfrost_node.blockfrost_api.client import EndpointTarget
from blockfrost_node.blockfrost_api.errors import (
    InvalidInputError,
    MissingCapabilityError,
    error_for_status,
)

logger = logging.getLogger(__name__)

SDK_BASE_URLS: Dict[str, str] = {
    "mainnet": ApiUrls.mainnet.value,
    "preprod": ApiUrls.preprod.value,
    "preview": ApiUrls.preview.value,
}
GENERIC_REQUEST_METHODS = ("request", "_request")


def create_sdk(project_id: str, network: str) -> BlockFrostApi:
    """Build the vendor client for ``network``."""
    base_url = SDK_BASE_URLS.get(network)
    if base_url is None:
        raise InvalidInputError(f"Unsupported network: {network}")
    return BlockFrostApi(project_id=project_id, base_url=base_url)


@dataclass(slots=True)
class SdkCall:
    """One typed SDK method invocation."""

    method: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)


async def _invoke(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    # The vendor SDK is blocking; keep it off the event loop.
    if inspect.iscoroutinefunction(fn):
        return await fn(*args, **kwargs)
    return await asyncio.to_thread(fn, *args, **kwargs)


def _map_sdk_error(exc: ApiError) -> Optional[Exception]:
    status = getattr(exc, "status_code", None)
    if not isinstance(status, int):
        return None
    return error_for_status(
        status,
        code=getattr(exc, "error", None),
        message=getattr(exc, "message", None),
    )


class FallbackRoute:
    """Route used when no SDK capability reaches the endpoint."""

    kind = "unavailable"

    def __init__(self, operation: str) -> None:
        self.operation = operation

    async def fetch(self, target: EndpointTarget, args: Tuple[Any, ...]) -> Any:
        raise MissingCapabilityError(
            f"Blockfrost SDK exposes no request method for {self.operation}"
        )


class TypedEndpointRoute(FallbackRoute):
    """Call the SDK's own method for the endpoint."""

    kind = "typed"

    def __init__(self, operation: str, method: Callable[..., Any]) -> None:
        super().__init__(operation)
        self.method = method

    async def fetch(self, target: EndpointTarget, args: Tuple[Any, ...]) -> Any:
        return await _invoke(self.method, *args, return_type="json", **target.query_params)


class GenericRequestRoute(FallbackRoute):
    """Send the literal path through the SDK's low-level request method."""

    kind = "generic"

    def __init__(self, operation: str, request: Callable[..., Any], name: str) -> None:
        super().__init__(operation)
        self.request = request
        self.name = name

    async def fetch(self, target: EndpointTarget, args: Tuple[Any, ...]) -> Any:
        return await _invoke(self.request, target.path, params=dict(target.query_params))


def select_fallback_route(sdk: Any, operation: str, typed_method: Optional[str]) -> FallbackRoute:
    """Pick the capability used for a fallback operation."""
    if typed_method:
        method = getattr(sdk, typed_method, None)
        if callable(method):
            return TypedEndpointRoute(operation, method)
    for name in GENERIC_REQUEST_METHODS:
        request = getattr(sdk, name, None)
        if callable(request):
            return GenericRequestRoute(operation, request, name)
    return FallbackRoute(operation)


class SdkGateway:
    """Async facade over one vendor SDK instance."""

    def __init__(self, sdk: Any, fallbacks: Mapping[str, Optional[str]] | None = None) -> None:
        self._sdk = sdk
        self._routes: Dict[str, FallbackRoute] = {
            operation: select_fallback_route(sdk, operation, typed_method)
            for operation, typed_method in (fallbacks or {}).items()
        }
        for operation, route in self._routes.items():
            logger.debug("SDK fallback route for %s: %s", operation, route.kind)

    def route_for(self, operation: str) -> FallbackRoute:
        route = self._routes.get(operation)
        if route is None:
            route = FallbackRoute(operation)
        return route

    async def call(self, call: SdkCall) -> Any:
        """Run a typed SDK method and return its JSON payload."""
        method = getattr(self._sdk, call.method, None)
        if not callable(method):
            raise MissingCapabilityError(f"Blockfrost SDK has no method {call.method}")
        try:
            return await _invoke(method, *call.args, return_type="json", **call.kwargs)
        except ApiError as exc:
            mapped = _map_sdk_error(exc)
            if mapped is None:
                raise
            raise mapped from exc

    async def fetch_fallback(
        self, operation: str, target: EndpointTarget, args: Tuple[Any, ...] = ()
    ) -> Any:
        """Reach a fallback endpoint through the route chosen at construction."""
        try:
            return await self.route_for(operation).fetch(target, args)
        except ApiError as exc:
            mapped = _map_sdk_error(exc)
            if mapped is None:
                raise
            raise mapped from exc
