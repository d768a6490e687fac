"""Utility operations: address derivation and transaction evaluation."""

from blockfrost_node.operations.definitions import (
    CBOR_PAYLOAD,
    UTXO_ENVELOPE_PAYLOAD,
    OperationDefinition,
)

CATEGORY = ("utilities", "Utilities")

OPERATIONS = [
    OperationDefinition(
        "utilities",
        "deriveAddress",
        "Derive Address",
        "Derive a Shelley address from an extended public key",
        path="/utils/addresses/xpub/{xpub}/{role}/{index}",
        required=("xpub", "role", "index"),
    ),
    OperationDefinition(
        "utilities",
        "evaluateTransaction",
        "Evaluate Transaction",
        "Submit a transaction for execution units evaluation",
        path="/utils/txs/evaluate",
        required=("transactionCbor",),
        method="POST",
        payload=CBOR_PAYLOAD,
    ),
    OperationDefinition(
        "utilities",
        "evaluateTransactionUtxos",
        "Evaluate Transaction with Additional UTXOs",
        "Submit a transaction for execution units evaluation with an additional UTXO set",
        path="/utils/txs/evaluate/utxos",
        required=("transactionCbor",),
        optional=("additionalUtxos",),
        method="POST",
        payload=UTXO_ENVELOPE_PAYLOAD,
    ),
]
