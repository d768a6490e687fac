"""
Dispatch node parameters to exactly one Blockfrost call.

Parameters are first translated into an ``OperationRequest`` whose fields are
typed per the field table; the request is then planned as either an SDK call
or an ``EndpointTarget`` and sent once. Input guards run before any network
activity.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from blockfrost_node.blockfrost_api import (
    BlockfrostHttpClient,
    EndpointTarget,
    InvalidInputError,
    SdkCall,
    SdkGateway,
)
from blockfrost_node.config import BlockfrostConfig, default_config
from blockfrost_node.normalizer import normalize_response
from blockfrost_node.operations import FIELDS, OperationDefinition, get_operation
from blockfrost_node.operations.definitions import (
    CBOR_PAYLOAD,
    SDK,
    UTXO_ENVELOPE_PAYLOAD,
)
from blockfrost_node.operations.validators import (
    coerce_int,
    is_blank,
    is_valid_stake_address,
    parse_utxo_set,
    require_non_negative,
)

logger = logging.getLogger(__name__)

NON_NEGATIVE_FIELDS = {"slotNumber", "epochNumber", "epochSlotNumber"}
ORDER_VALUES = {"asc", "desc"}

_MISSING_MESSAGES = {
    "hashOrNumber": "Block hash or number must not be empty",
    "asset": "Asset unit is required",
}

Plan = Union[SdkCall, EndpointTarget]


@dataclass(slots=True)
class OperationRequest:
    """Typed request for one (category, operation) pair."""

    category: str
    operation: str
    fields: Dict[str, Any] = field(default_factory=dict)


def _coerce(name: str, value: Any) -> Any:
    kind = FIELDS[name].type
    if kind == "number":
        parsed = coerce_int(value, name)
        if name in NON_NEGATIVE_FIELDS:
            require_non_negative(parsed, name)
        return parsed
    if kind == "json":
        return parse_utxo_set(value)
    if kind == "options":
        text = str(value).strip().lower()
        if text not in ORDER_VALUES:
            raise InvalidInputError(f"Invalid {name}: {value!r}")
        return text
    return str(value).strip()


def build_request(
    definition: OperationDefinition,
    parameters: Mapping[str, Any],
    config: BlockfrostConfig = default_config,
) -> OperationRequest:
    """Read exactly the fields ``definition`` declares, applying defaults and guards."""
    fields: Dict[str, Any] = {}
    for name in definition.required:
        value = parameters.get(name)
        if is_blank(value):
            raise InvalidInputError(_MISSING_MESSAGES.get(name, f"Missing required field: {name}"))
        fields[name] = _coerce(name, value)

    for name in definition.optional:
        value = parameters.get(name)
        fields[name] = _coerce(name, FIELDS[name].default if is_blank(value) else value)

    paging_defaults = {
        "count": config.default_count,
        "page": config.default_page,
        "order": config.default_order,
    }
    for name in definition.paging:
        value = parameters.get(name)
        fields[name] = _coerce(name, paging_defaults[name] if is_blank(value) else value)

    return OperationRequest(definition.category, definition.operation, fields)


def build_target(definition: OperationDefinition, request: OperationRequest) -> EndpointTarget:
    """Substitute path parameters and attach pagination and body for a direct call."""
    values = {name: quote(str(value), safe="") for name, value in request.fields.items()}
    path = definition.path.format_map(values)
    query_params = {name: request.fields[name] for name in definition.paging}

    body: Optional[str] = None
    if definition.payload == CBOR_PAYLOAD:
        body = request.fields["transactionCbor"]
    elif definition.payload == UTXO_ENVELOPE_PAYLOAD:
        body = json.dumps(
            {
                "cbor": request.fields["transactionCbor"],
                "additionalUtxoSet": request.fields.get("additionalUtxos", []),
            }
        )

    return EndpointTarget(
        path=path,
        method=definition.method,
        query_params=query_params,
        body=body,
        content_type=definition.content_type,
    )


def plan(definition: OperationDefinition, request: OperationRequest) -> Plan:
    """Choose the SDK call or the endpoint target for ``request``."""
    if definition.transport == SDK:
        return SdkCall(
            method=definition.sdk_method,
            args=tuple(request.fields[name] for name in definition.sdk_args),
            kwargs={name: request.fields[name] for name in definition.paging},
        )
    return build_target(definition, request)


class Dispatcher:
    """Run one operation against the SDK gateway or the HTTP client."""

    def __init__(
        self,
        sdk: SdkGateway,
        http: BlockfrostHttpClient,
        *,
        network: str = "mainnet",
        config: BlockfrostConfig | None = None,
    ) -> None:
        self.sdk = sdk
        self.http = http
        self.network = network
        self.config = config or default_config

    def prepare(
        self, category: str, operation: str, parameters: Mapping[str, Any]
    ) -> tuple[OperationDefinition, OperationRequest]:
        definition = get_operation(category, operation)
        request = build_request(definition, parameters, self.config)
        return definition, request

    def _check_stake_address(self, request: OperationRequest) -> None:
        stake_address = request.fields.get("stakeAddress")
        if stake_address is None or self.network != "mainnet":
            return
        if not is_valid_stake_address(stake_address):
            logger.warning(
                "Stake address does not look like a mainnet stake address: %s", stake_address
            )

    async def dispatch(
        self, category: str, operation: str, parameters: Mapping[str, Any]
    ) -> List[Any]:
        """Perform the single call for (category, operation) and return normalized items."""
        definition, request = self.prepare(category, operation, parameters)
        self._check_stake_address(request)
        target = plan(definition, request)

        if isinstance(target, SdkCall):
            logger.debug("operation=%s sdk_method=%s", definition.key, target.method)
            result = await self.sdk.call(target)
        elif definition.fallback:
            logger.debug("operation=%s fallback path=%s", definition.key, target.path)
            args = tuple(request.fields[name] for name in definition.sdk_args)
            result = await self.sdk.fetch_fallback(definition.key, target, args)
        else:
            logger.debug("operation=%s %s %s", definition.key, target.method, target.path)
            result = await self.http.send(target)

        return normalize_response(result)
