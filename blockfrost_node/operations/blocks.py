"""Block operations."""

from blockfrost_node.operations.definitions import COUNT_PAGE, PAGED, OperationDefinition

CATEGORY = ("blocks", "Blocks")

_BLOCK = ("hashOrNumber",)

OPERATIONS = [
    OperationDefinition(
        "blocks",
        "getLatestBlock",
        "Get Latest Block",
        "Return the latest block available to the backends",
        path="/blocks/latest",
    ),
    OperationDefinition(
        "blocks",
        "getLatestBlockTransactions",
        "Get Latest Block Transactions",
        "Return the transactions within the latest block",
        path="/blocks/latest/txs",
        paging=PAGED,
    ),
    OperationDefinition(
        "blocks",
        "getBlock",
        "Get Block",
        "Return the content of a requested block",
        path="/blocks/{hashOrNumber}",
        required=_BLOCK,
    ),
    OperationDefinition(
        "blocks",
        "getBlockInSlot",
        "Get Block in Slot",
        "Return the content of a block in a specific slot",
        path="/blocks/slot/{slotNumber}",
        required=("slotNumber",),
    ),
    OperationDefinition(
        "blocks",
        "getBlockInEpochSlot",
        "Get Block in Epoch Slot",
        "Return the content of a block in a specific slot of an epoch",
        path="/blocks/epoch/{epochNumber}/slot/{epochSlotNumber}",
        required=("epochNumber", "epochSlotNumber"),
    ),
    OperationDefinition(
        "blocks",
        "getNextBlocks",
        "Get Next Blocks",
        "Return the list of blocks following a specific block",
        path="/blocks/{hashOrNumber}/next",
        required=_BLOCK,
        paging=COUNT_PAGE,
    ),
    OperationDefinition(
        "blocks",
        "getPreviousBlocks",
        "Get Previous Blocks",
        "Return the list of blocks preceding a specific block",
        path="/blocks/{hashOrNumber}/previous",
        required=_BLOCK,
        paging=COUNT_PAGE,
    ),
    OperationDefinition(
        "blocks",
        "getBlockTransactions",
        "Get Block Transactions",
        "Return the transactions within a block",
        path="/blocks/{hashOrNumber}/txs",
        required=_BLOCK,
        paging=PAGED,
    ),
    OperationDefinition(
        "blocks",
        "getBlockAddresses",
        "Get Addresses Affected in Block",
        "Return the addresses affected in a specific block",
        path="/blocks/{hashOrNumber}/addresses",
        required=_BLOCK,
        paging=COUNT_PAGE,
    ),
]
