"""Ledger operations (vendor SDK)."""

from blockfrost_node.operations.definitions import OperationDefinition

CATEGORY = ("ledger", "Ledger")

OPERATIONS = [
    OperationDefinition(
        "ledger",
        "getGenesis",
        "Get Blockchain Genesis",
        "Return the information about blockchain genesis",
        path="/genesis",
        sdk_method="genesis",
    ),
]
