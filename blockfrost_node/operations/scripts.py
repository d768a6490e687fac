"""Script and datum operations."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("scripts", "Scripts")

_SCRIPT = ("scriptHash",)
_DATUM = ("datumHash",)

OPERATIONS = [
    OperationDefinition(
        "scripts", "getScripts", "Get Scripts", "List of scripts", path="/scripts", paging=PAGED
    ),
    OperationDefinition(
        "scripts",
        "getScript",
        "Get Script",
        "Information about a specific script",
        path="/scripts/{scriptHash}",
        required=_SCRIPT,
    ),
    OperationDefinition(
        "scripts",
        "getScriptJson",
        "Get Script JSON",
        "JSON representation of a timelock script",
        path="/scripts/{scriptHash}/json",
        required=_SCRIPT,
    ),
    OperationDefinition(
        "scripts",
        "getScriptCbor",
        "Get Script CBOR",
        "CBOR representation of a Plutus script",
        path="/scripts/{scriptHash}/cbor",
        required=_SCRIPT,
    ),
    OperationDefinition(
        "scripts",
        "getScriptRedeemers",
        "Get Script Redeemers",
        "List of redeemers of a specific script",
        path="/scripts/{scriptHash}/redeemers",
        required=_SCRIPT,
        paging=PAGED,
    ),
    OperationDefinition(
        "scripts",
        "getDatum",
        "Get Datum",
        "Query JSON value of a datum by its hash",
        path="/scripts/datum/{datumHash}",
        required=_DATUM,
    ),
    OperationDefinition(
        "scripts",
        "getDatumCbor",
        "Get Datum CBOR",
        "Query CBOR serialised datum by its hash",
        path="/scripts/datum/{datumHash}/cbor",
        required=_DATUM,
    ),
]
