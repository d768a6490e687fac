import string

import pytest

from blockfrost_node.blockfrost_api import UnknownSelectionError
from blockfrost_node.operations import (
    CATEGORIES,
    FIELDS,
    REGISTRY,
    all_operations,
    fallback_methods,
    get_operation,
)
from blockfrost_node.operations.definitions import HTTP, SDK
from blockfrost_node.schema import build_node_properties, visible_fields


def _placeholders(template: str) -> set:
    return {name for _, name, _, _ in string.Formatter().parse(template) if name}


def test_sixteen_categories():
    assert [value for value, _ in CATEGORIES] == [
        "accounts",
        "addresses",
        "assets",
        "blocks",
        "epochs",
        "governance",
        "ledger",
        "mempool",
        "metadata",
        "network",
        "pools",
        "scripts",
        "transactions",
        "utilities",
        "health",
        "metrics",
    ]


@pytest.mark.parametrize("op", all_operations(), ids=lambda op: op.key)
def test_operation_is_consistent(op):
    assert op.transport in (SDK, HTTP)
    if op.transport == SDK:
        assert op.sdk_method
        assert set(op.sdk_args) <= set(op.required)
    assert _placeholders(op.path) <= set(op.required)
    assert all(name in FIELDS for name in op.fields)
    assert set(op.paging) in (set(), {"count", "page"}, {"count", "page", "order"})


def test_schema_shows_exactly_the_fields_dispatch_reads():
    properties = build_node_properties()
    for op in all_operations():
        assert visible_fields(properties, op.category, op.operation) == set(op.fields), op.key


def test_sdk_backed_categories():
    for category in ("health", "metrics", "ledger"):
        assert all(op.transport == SDK for op in REGISTRY[category].values())
    assert get_operation("network", "getNetwork").transport == SDK
    for category in ("assets", "blocks", "epochs", "governance", "mempool", "metadata", "pools", "scripts", "transactions", "utilities"):
        assert all(op.transport == HTTP for op in REGISTRY[category].values())


def test_fallback_operations():
    assert fallback_methods() == {
        "accounts.getUtxos": "account_utxos",
        "addresses.getAddressUtxosAsset": "address_utxos_asset",
    }
    assert get_operation("accounts", "getUtxos").transport == HTTP


def test_post_operations():
    posts = {op.key: op.content_type for op in all_operations() if op.method == "POST"}
    assert posts == {
        "transactions.submitTransaction": "application/cbor",
        "utilities.evaluateTransaction": "application/cbor",
        "utilities.evaluateTransactionUtxos": "application/json",
    }


def test_unknown_selection():
    with pytest.raises(UnknownSelectionError) as excinfo:
        get_operation("wallets", "getWallet")
    assert "wallets" in str(excinfo.value)
    with pytest.raises(UnknownSelectionError) as excinfo:
        get_operation("blocks", "getBlok")
    assert "getBlok" in str(excinfo.value)


def test_node_properties_shape():
    properties = build_node_properties()
    category = properties[0]
    assert category["name"] == "category"
    assert category["default"] == "accounts"
    operation_props = [p for p in properties if p["name"] == "operation"]
    assert len(operation_props) == 16
    health = next(p for p in operation_props if p["displayOptions"]["show"]["category"] == ["health"])
    assert [o["value"] for o in health["options"]] == ["root", "health", "clock"]
    assert health["options"][1]["description"].endswith("(GET /health)")
    order = next(p for p in properties if p["name"] == "order")
    assert order["default"] == "asc"
    assert [o["value"] for o in order["options"]] == ["asc", "desc"]
    utxos = next(p for p in properties if p["name"] == "additionalUtxos")
    assert utxos["default"] == "[]"
    assert utxos["required"] is False
