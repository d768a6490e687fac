"""Exception taxonomy shared by the dispatcher, the SDK gateway and the HTTP client."""

from __future__ import annotations

from typing import Any, Optional


class BlockfrostError(Exception):
    """Base exception for every failure raised while running an operation."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class UnknownSelectionError(BlockfrostError):
    """Raised when a category or operation is not in the operation table."""


class MissingCapabilityError(BlockfrostError):
    """Raised when the SDK offers no way to reach a fallback endpoint."""


class InvalidInputError(BlockfrostError):
    """Raised when node parameters are rejected before any network call."""


class BlockfrostApiError(BlockfrostError):
    """Raised when Blockfrost answers with an error status."""


class UnauthorizedError(BlockfrostApiError):
    """Raised when the project ID is missing, invalid or for another network."""


class NotFoundError(BlockfrostApiError):
    """Raised when the requested resource does not exist."""


class UsageLimitError(BlockfrostApiError):
    """Raised when the project is over its daily limit, rate limited or banned."""


class ServiceUnreachableError(BlockfrostApiError):
    """Raised when Blockfrost cannot be reached."""


def error_for_status(
    status_code: int,
    *,
    code: Optional[str] = None,
    message: Optional[str] = None,
) -> BlockfrostApiError:
    """Map a Blockfrost error status to the matching exception."""
    text = f"HTTP {status_code}: {message or code or 'Unknown error'}"
    if status_code in {401, 403}:
        return UnauthorizedError(text, code=code, status_code=status_code)
    if status_code == 404:
        return NotFoundError(text, code=code, status_code=status_code)
    # 402 daily limit, 418 auto-ban, 429 rate limited
    if status_code in {402, 418, 429}:
        return UsageLimitError(text, code=code, status_code=status_code)
    return BlockfrostApiError(text, code=code, status_code=status_code)


def describe_api_error(error: Any) -> str:
    """
    Render an upstream failure as ``HTTP <status>: <message>``.

    Accepts exceptions carrying a ``response`` (httpx style), exceptions with
    ``status_code``/``message`` attributes (Blockfrost SDK ``ApiError``) and
    plain exceptions.
    """
    response = getattr(error, "response", None)
    status = getattr(response, "status_code", None)
    if status is not None:
        message = None
        try:
            data = response.json()
        except (ValueError, AttributeError):
            data = None
        if isinstance(data, dict):
            message = data.get("message")
        return f"HTTP {status}: {message or 'Unknown error'}"

    status = getattr(error, "status_code", None)
    if isinstance(status, int):
        message = getattr(error, "message", None) or "Unknown error"
        return f"HTTP {status}: {message}"

    return str(error) or "Unknown error"
