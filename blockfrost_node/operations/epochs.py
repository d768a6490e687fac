"""Epoch operations."""

from blockfrost_node.operations.definitions import COUNT_PAGE, PAGED, OperationDefinition

CATEGORY = ("epochs", "Epochs")

_EPOCH = ("epochNumber",)
_EPOCH_POOL = ("epochNumber", "poolId")

OPERATIONS = [
    OperationDefinition(
        "epochs",
        "getLatestEpoch",
        "Get Latest Epoch",
        "Return the information about the latest, therefore current, epoch",
        path="/epochs/latest",
    ),
    OperationDefinition(
        "epochs",
        "getLatestEpochParameters",
        "Get Latest Epoch Protocol Parameters",
        "Return the protocol parameters for the latest epoch",
        path="/epochs/latest/parameters",
    ),
    OperationDefinition(
        "epochs",
        "getEpoch",
        "Get Epoch",
        "Return the content of the requested epoch",
        path="/epochs/{epochNumber}",
        required=_EPOCH,
    ),
    OperationDefinition(
        "epochs",
        "getNextEpochs",
        "Get Next Epochs",
        "Return the list of epochs following a specific epoch",
        path="/epochs/{epochNumber}/next",
        required=_EPOCH,
        paging=COUNT_PAGE,
    ),
    OperationDefinition(
        "epochs",
        "getPreviousEpochs",
        "Get Previous Epochs",
        "Return the list of epochs preceding a specific epoch",
        path="/epochs/{epochNumber}/previous",
        required=_EPOCH,
        paging=COUNT_PAGE,
    ),
    OperationDefinition(
        "epochs",
        "getEpochStakes",
        "Get Epoch Stake Distribution",
        "Return the active stake distribution for the specified epoch",
        path="/epochs/{epochNumber}/stakes",
        required=_EPOCH,
        paging=COUNT_PAGE,
    ),
    OperationDefinition(
        "epochs",
        "getEpochStakesByPool",
        "Get Epoch Stake Distribution by Pool",
        "Return the active stake distribution for the epoch specified by stake pool",
        path="/epochs/{epochNumber}/stakes/{poolId}",
        required=_EPOCH_POOL,
        paging=COUNT_PAGE,
    ),
    OperationDefinition(
        "epochs",
        "getEpochBlocks",
        "Get Epoch Blocks",
        "Return the blocks minted for the epoch specified",
        path="/epochs/{epochNumber}/blocks",
        required=_EPOCH,
        paging=PAGED,
    ),
    OperationDefinition(
        "epochs",
        "getEpochBlocksByPool",
        "Get Epoch Blocks by Pool",
        "Return the blocks minted for the epoch specified by stake pool",
        path="/epochs/{epochNumber}/blocks/{poolId}",
        required=_EPOCH_POOL,
        paging=PAGED,
    ),
    OperationDefinition(
        "epochs",
        "getEpochParameters",
        "Get Epoch Protocol Parameters",
        "Return the protocol parameters for the epoch specified",
        path="/epochs/{epochNumber}/parameters",
        required=_EPOCH,
    ),
]
