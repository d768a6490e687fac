"""Declarative building blocks for the category/operation table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from blockfrost_node.config import DEFAULT_COUNT, DEFAULT_ORDER, DEFAULT_PAGE

SDK = "sdk"
HTTP = "http"

# Request payload kinds for POST operations
CBOR_PAYLOAD = "cbor"
UTXO_ENVELOPE_PAYLOAD = "cbor_with_utxos"

CONTENT_TYPES = {
    CBOR_PAYLOAD: "application/cbor",
    UTXO_ENVELOPE_PAYLOAD: "application/json",
}

PAGED = ("count", "page", "order")
COUNT_PAGE = ("count", "page")


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """One user-facing node field."""

    name: str
    display_name: str
    type: str = "string"  # string, number, options or json
    default: Any = ""
    description: str = ""
    options: Tuple[Tuple[str, str], ...] = ()


FIELDS: Dict[str, FieldDefinition] = {
    field.name: field
    for field in (
        FieldDefinition("stakeAddress", "Stake Address", description="Stake address in Bech32 format"),
        FieldDefinition("address", "Address", description="Cardano address in Bech32 or Base58 format"),
        FieldDefinition(
            "asset",
            "Asset",
            description="Asset unit: policy ID concatenated with the hex-encoded asset name",
        ),
        FieldDefinition("policyId", "Policy ID", description="Minting policy ID"),
        FieldDefinition("hashOrNumber", "Hash or Number", description="Block hash or block number"),
        FieldDefinition("slotNumber", "Slot Number", type="number", default=0, description="Absolute slot number"),
        FieldDefinition("epochNumber", "Epoch Number", type="number", default=0, description="Epoch number"),
        FieldDefinition(
            "epochSlotNumber",
            "Epoch Slot Number",
            type="number",
            default=0,
            description="Slot position within the epoch",
        ),
        FieldDefinition("poolId", "Pool ID", description="Stake pool ID in Bech32 or hex format"),
        FieldDefinition("drepId", "DRep ID", description="Delegate representative ID in Bech32 or hex format"),
        FieldDefinition("txHash", "Transaction Hash", description="Transaction hash"),
        FieldDefinition(
            "certIndex",
            "Certificate Index",
            type="number",
            default=0,
            description="Index of the proposal certificate within the transaction",
        ),
        FieldDefinition("label", "Label", description="Metadata label"),
        FieldDefinition("scriptHash", "Script Hash", description="Script hash"),
        FieldDefinition("datumHash", "Datum Hash", description="Datum hash"),
        FieldDefinition("xpub", "Extended Public Key", description="Hex-encoded account extended public key"),
        FieldDefinition("role", "Role", type="number", default=0, description="Address role (0 external, 1 change)"),
        FieldDefinition("index", "Index", type="number", default=0, description="Address index"),
        FieldDefinition(
            "transactionCbor",
            "Transaction CBOR",
            description="Signed transaction serialized as CBOR",
        ),
        FieldDefinition(
            "additionalUtxos",
            "Additional UTXOs",
            type="json",
            default="[]",
            description="JSON array of additional UTXOs used during evaluation",
        ),
        FieldDefinition(
            "count",
            "Count",
            type="number",
            default=DEFAULT_COUNT,
            description="Number of results per page (max 100)",
        ),
        FieldDefinition("page", "Page", type="number", default=DEFAULT_PAGE, description="Page number"),
        FieldDefinition(
            "order",
            "Order",
            type="options",
            default=DEFAULT_ORDER,
            description="Ordering of items from the point of view of the blockchain",
            options=(("Ascending", "asc"), ("Descending", "desc")),
        ),
    )
}


@dataclass(frozen=True, slots=True)
class OperationDefinition:
    """
    One (category, operation) pair.

    ``path`` is a literal template whose ``{field}`` placeholders are filled
    from the request fields. SDK operations name the vendor method in
    ``sdk_method`` and pass ``sdk_args`` positionally. Fallback operations are
    HTTP paths reached through the SDK instance (typed ``sdk_method`` when the
    SDK has it, generic request otherwise).
    """

    category: str
    operation: str
    name: str
    description: str
    path: str
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    paging: Tuple[str, ...] = ()
    method: str = "GET"
    sdk_method: Optional[str] = None
    sdk_args: Tuple[str, ...] = ()
    fallback: bool = False
    payload: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.category}.{self.operation}"

    @property
    def transport(self) -> str:
        if self.sdk_method and not self.fallback:
            return SDK
        return HTTP

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.required + self.optional + self.paging

    @property
    def content_type(self) -> Optional[str]:
        if self.payload is None:
            return None
        return CONTENT_TYPES[self.payload]
