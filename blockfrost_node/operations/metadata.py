"""Transaction metadata operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("metadata", "Metadata")

OPERATIONS = [
    OperationDefinition(
        "metadata",
        "getTransactionMetadataLabels",
        "Get Transaction Metadata Labels",
        "List of all used transaction metadata labels",
        path="/metadata/txs/labels",
        paging=PAGED,
    ),
    OperationDefinition(
        "metadata",
        "getTransactionMetadataJson",
        "Get Transaction Metadata Content in JSON",
        "Transaction metadata per label",
        path="/metadata/txs/labels/{label}",
        required=("label",),
        paging=PAGED,
    ),
    OperationDefinition(
        "metadata",
        "getTransactionMetadataCbor",
        "Get Transaction Metadata Content in CBOR",
        "Transaction metadata per label in CBOR",
        path="/metadata/txs/labels/{label}/cbor",
        required=("label",),
        paging=PAGED,
    ),
]
