"""Native asset operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("assets", "Assets")

OPERATIONS = [
    OperationDefinition(
        "assets", "getAssets", "Get Assets", "List of assets", path="/assets", paging=PAGED
    ),
    OperationDefinition(
        "assets",
        "getAsset",
        "Get Asset",
        "Information about a specific asset",
        path="/assets/{asset}",
        required=("asset",),
    ),
    OperationDefinition(
        "assets",
        "getAssetHistory",
        "Get Asset History",
        "History of a specific asset",
        path="/assets/{asset}/history",
        required=("asset",),
        paging=PAGED,
    ),
    OperationDefinition(
        "assets",
        "getAssetTransactions",
        "Get Asset Transactions",
        "List of a specific asset transactions",
        path="/assets/{asset}/transactions",
        required=("asset",),
        paging=PAGED,
    ),
    OperationDefinition(
        "assets",
        "getAssetAddresses",
        "Get Asset Addresses",
        "List of addresses containing a specific asset",
        path="/assets/{asset}/addresses",
        required=("asset",),
        paging=PAGED,
    ),
    OperationDefinition(
        "assets",
        "getAssetsByPolicy",
        "Get Assets of a Policy",
        "List of assets minted under a specific policy",
        path="/assets/policy/{policyId}",
        required=("policyId",),
        paging=PAGED,
    ),
]
