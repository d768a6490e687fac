"""HTTP and SDK access to the Blockfrost API."""

from .client import BlockfrostHttpClient, EndpointTarget, resolve_base_url
from .errors import (
    BlockfrostApiError,
    BlockfrostError,
    InvalidInputError,
    MissingCapabilityError,
    NotFoundError,
    ServiceUnreachableError,
    UnauthorizedError,
    UnknownSelectionError,
    UsageLimitError,
    describe_api_error,
)
from .sdk import SdkCall, SdkGateway, create_sdk

__all__ = [
    "BlockfrostHttpClient",
    "EndpointTarget",
    "resolve_base_url",
    "SdkCall",
    "SdkGateway",
    "create_sdk",
    "BlockfrostError",
    "BlockfrostApiError",
    "UnknownSelectionError",
    "MissingCapabilityError",
    "InvalidInputError",
    "UnauthorizedError",
    "NotFoundError",
    "UsageLimitError",
    "ServiceUnreachableError",
    "describe_api_error",
]
