"""Network operations."""

from blockfrost_node.operations.definitions import OperationDefinition

CATEGORY = ("network", "Network")

OPERATIONS = [
    OperationDefinition(
        "network",
        "getNetwork",
        "Get Network Information",
        "Return detailed network information such as supply and stake",
        path="/network",
        sdk_method="network",
    ),
    # Not wrapped by the SDK.
    OperationDefinition(
        "network",
        "getNetworkEras",
        "Get Network Eras",
        "Return the era boundaries and parameters of the network",
        path="/network/eras",
    ),
]
