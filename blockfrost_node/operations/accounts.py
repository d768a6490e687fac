"""Account (stake address) operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("accounts", "Accounts")

_STAKE = ("stakeAddress",)


def _account(operation: str, name: str, description: str, suffix: str, sdk_method: str, *, paged: bool = True):
    return OperationDefinition(
        "accounts",
        operation,
        name,
        description,
        path="/accounts/{stakeAddress}" + suffix,
        required=_STAKE,
        paging=PAGED if paged else (),
        sdk_method=sdk_method,
        sdk_args=_STAKE,
    )


OPERATIONS = [
    _account("getAccount", "Get Account", "Get specific account information", "", "accounts", paged=False),
    _account("getAccountRewards", "Get Account Rewards", "Get account reward history", "/rewards", "account_rewards"),
    _account("getAccountHistory", "Get Account History", "Get account history", "/history", "account_history"),
    _account(
        "getAccountDelegations",
        "Get Account Delegations",
        "Get account delegation history",
        "/delegations",
        "account_delegations",
    ),
    _account(
        "getAccountRegistrations",
        "Get Account Registrations",
        "Get account registration history",
        "/registrations",
        "account_registrations",
    ),
    _account(
        "getAccountWithdrawals",
        "Get Account Withdrawals",
        "Get account withdrawal history",
        "/withdrawals",
        "account_withdrawals",
    ),
    _account("getAccountMirs", "Get Account MIRs", "Get account MIR history", "/mirs", "account_mirs"),
    _account(
        "getAccountAddresses",
        "Get Account Addresses",
        "Get account associated addresses",
        "/addresses",
        "account_addresses",
    ),
    _account(
        "getAccountAddressesAssets",
        "Get Account Addresses Assets",
        "Get assets associated with account addresses",
        "/addresses/assets",
        "account_addresses_assets",
    ),
    _account(
        "getAccountAddressesTotal",
        "Get Account Addresses Total",
        "Get summed details about all addresses associated with the account",
        "/addresses/total",
        "account_addresses_total",
        paged=False,
    ),
    OperationDefinition(
        "accounts",
        "getUtxos",
        "Get Account UTXOs",
        "Get UTXOs associated with the account",
        path="/accounts/{stakeAddress}/utxos",
        required=_STAKE,
        paging=PAGED,
        sdk_method="account_utxos",
        sdk_args=_STAKE,
        fallback=True,
    ),
]
