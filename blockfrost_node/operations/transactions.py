"""Transaction operations."""

from blockfrost_node.operations.definitions import CBOR_PAYLOAD, OperationDefinition

CATEGORY = ("transactions", "Transactions")

_TX = ("txHash",)


def _tx(operation: str, name: str, description: str, suffix: str = ""):
    return OperationDefinition(
        "transactions",
        operation,
        name,
        description,
        path="/txs/{txHash}" + suffix,
        required=_TX,
    )


OPERATIONS = [
    _tx("getTransaction", "Get Transaction", "Return content of the requested transaction"),
    _tx("getTransactionUtxos", "Get Transaction UTXOs", "Return the inputs and UTXOs of the transaction", "/utxos"),
    _tx("getTransactionStakes", "Get Transaction Stake Certificates", "Obtain information about (de)registration of stake addresses", "/stakes"),
    _tx("getTransactionDelegations", "Get Transaction Delegation Certificates", "Obtain information about delegation certificates", "/delegations"),
    _tx("getTransactionWithdrawals", "Get Transaction Withdrawals", "Obtain information about withdrawals", "/withdrawals"),
    _tx("getTransactionMirs", "Get Transaction MIRs", "Obtain information about Move Instantaneous Rewards", "/mirs"),
    _tx("getTransactionPoolUpdates", "Get Transaction Pool Updates", "Obtain information about stake pool registration and update certificates", "/pool_updates"),
    _tx("getTransactionPoolRetires", "Get Transaction Pool Retirements", "Obtain information about stake pool retirements", "/pool_retires"),
    _tx("getTransactionMetadata", "Get Transaction Metadata", "Obtain the transaction metadata", "/metadata"),
    _tx("getTransactionMetadataCbor", "Get Transaction Metadata in CBOR", "Obtain the transaction metadata in CBOR", "/metadata/cbor"),
    _tx("getTransactionRedeemers", "Get Transaction Redeemers", "Obtain the transaction redeemers", "/redeemers"),
    _tx("getTransactionRequiredSigners", "Get Transaction Required Signers", "Obtain the extra transaction witnesses", "/required_signers"),
    _tx("getTransactionCbor", "Get Transaction CBOR", "Obtain the CBOR serialized transaction", "/cbor"),
    OperationDefinition(
        "transactions",
        "submitTransaction",
        "Submit Transaction",
        "Submit an already serialized transaction to the network",
        path="/tx/submit",
        required=("transactionCbor",),
        method="POST",
        payload=CBOR_PAYLOAD,
    ),
]
