"""Address operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("addresses", "Addresses")

_ADDRESS = ("address",)

OPERATIONS = [
    OperationDefinition(
        "addresses",
        "getAddress",
        "Get Address",
        "Obtain information about a specific address",
        path="/addresses/{address}",
        required=_ADDRESS,
        sdk_method="address",
        sdk_args=_ADDRESS,
    ),
    OperationDefinition(
        "addresses",
        "getAddressExtended",
        "Get Address Extended",
        "Obtain extended information about a specific address",
        path="/addresses/{address}/extended",
        required=_ADDRESS,
        sdk_method="address_extended",
        sdk_args=_ADDRESS,
    ),
    OperationDefinition(
        "addresses",
        "getAddressTotal",
        "Get Address Details",
        "Obtain details about an address",
        path="/addresses/{address}/total",
        required=_ADDRESS,
        sdk_method="address_total",
        sdk_args=_ADDRESS,
    ),
    OperationDefinition(
        "addresses",
        "getAddressUtxos",
        "Get Address UTXOs",
        "UTXOs of the address",
        path="/addresses/{address}/utxos",
        required=_ADDRESS,
        paging=PAGED,
        sdk_method="address_utxos",
        sdk_args=_ADDRESS,
    ),
    OperationDefinition(
        "addresses",
        "getAddressUtxosAsset",
        "Get Address UTXOs of an Asset",
        "UTXOs of the address containing a specific asset",
        path="/addresses/{address}/utxos/{asset}",
        required=("address", "asset"),
        paging=PAGED,
        sdk_method="address_utxos_asset",
        sdk_args=("address", "asset"),
        fallback=True,
    ),
    OperationDefinition(
        "addresses",
        "getAddressTransactions",
        "Get Address Transactions",
        "Transactions on the address",
        path="/addresses/{address}/transactions",
        required=_ADDRESS,
        paging=PAGED,
        sdk_method="address_transactions",
        sdk_args=_ADDRESS,
    ),
]
