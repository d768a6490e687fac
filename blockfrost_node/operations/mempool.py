"""Mempool operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("mempool", "Mempool")

OPERATIONS = [
    OperationDefinition(
        "mempool",
        "getMempool",
        "Get Mempool",
        "Return transactions currently stored in the Blockfrost mempool",
        path="/mempool",
        paging=PAGED,
    ),
    OperationDefinition(
        "mempool",
        "getMempoolTransaction",
        "Get Mempool Transaction",
        "Return content of a specific transaction in the mempool",
        path="/mempool/{txHash}",
        required=("txHash",),
    ),
    OperationDefinition(
        "mempool",
        "getMempoolByAddress",
        "Get Mempool by Address",
        "List of mempool transactions where inputs or outputs contain the address",
        path="/mempool/addresses/{address}",
        required=("address",),
        paging=PAGED,
    ),
]
