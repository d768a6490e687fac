"""Stake pool operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("pools", "Pools")

_POOL = ("poolId",)


def _pool(operation: str, name: str, description: str, suffix: str, *, paged: bool = False):
    return OperationDefinition(
        "pools",
        operation,
        name,
        description,
        path="/pools/{poolId}" + suffix,
        required=_POOL,
        paging=PAGED if paged else (),
    )


OPERATIONS = [
    OperationDefinition(
        "pools", "getPools", "Get Stake Pools", "List of registered stake pools", path="/pools", paging=PAGED
    ),
    OperationDefinition(
        "pools",
        "getPoolsExtended",
        "Get Stake Pools Extended",
        "List of registered stake pools with additional information",
        path="/pools/extended",
        paging=PAGED,
    ),
    OperationDefinition(
        "pools",
        "getRetiredPools",
        "Get Retired Stake Pools",
        "List of already retired pools",
        path="/pools/retired",
        paging=PAGED,
    ),
    OperationDefinition(
        "pools",
        "getRetiringPools",
        "Get Retiring Stake Pools",
        "List of stake pools retiring in the upcoming epochs",
        path="/pools/retiring",
        paging=PAGED,
    ),
    _pool("getPool", "Get Stake Pool", "Pool information", ""),
    _pool("getPoolHistory", "Get Stake Pool History", "History of stake pool parameters over epochs", "/history", paged=True),
    _pool("getPoolMetadata", "Get Stake Pool Metadata", "Stake pool registration metadata", "/metadata"),
    _pool("getPoolRelays", "Get Stake Pool Relays", "Relays of a stake pool", "/relays"),
    _pool("getPoolDelegators", "Get Stake Pool Delegators", "List of current stake pool delegators", "/delegators", paged=True),
    _pool("getPoolBlocks", "Get Stake Pool Blocks", "List of stake pool blocks", "/blocks", paged=True),
    _pool("getPoolUpdates", "Get Stake Pool Updates", "List of certificate updates to the stake pool", "/updates", paged=True),
    _pool("getPoolVotes", "Get Stake Pool Votes", "History of stake pool votes", "/votes", paged=True),
]
