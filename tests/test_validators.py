import pytest

from blockfrost_node.blockfrost_api import InvalidInputError
from blockfrost_node.operations import validators

MAINNET_STAKE = "stake1u9ylzsgxaa6xctf4juup682ar3juj85n8tx3hthnljg47zctvm3rc"


def test_stake_address_validation():
    assert len(MAINNET_STAKE) == 59
    assert validators.is_valid_stake_address(MAINNET_STAKE)
    assert not validators.is_valid_stake_address("stake_test1uqfu74w3wh4gfzu8m6e7j987h4lq9r3t7ef5gaw497uu85qsqfy27")
    assert not validators.is_valid_stake_address("stake1short")
    assert not validators.is_valid_stake_address(None)


def test_coerce_int():
    assert validators.coerce_int("300", "epochNumber") == 300
    assert validators.coerce_int(12, "slotNumber") == 12
    assert validators.coerce_int(7.0, "page") == 7
    for bad in ("abc", 1.5, True, None):
        with pytest.raises(InvalidInputError):
            validators.coerce_int(bad, "count")


def test_require_non_negative():
    assert validators.require_non_negative(0, "slotNumber") == 0
    with pytest.raises(InvalidInputError):
        validators.require_non_negative(-1, "slotNumber")


def test_parse_utxo_set():
    assert validators.parse_utxo_set("[]") == []
    assert validators.parse_utxo_set("") == []
    assert validators.parse_utxo_set('[{"tx_hash": "ab"}]') == [{"tx_hash": "ab"}]
    assert validators.parse_utxo_set([1, 2]) == [1, 2]
    with pytest.raises(InvalidInputError):
        validators.parse_utxo_set("{not json")
    with pytest.raises(InvalidInputError):
        validators.parse_utxo_set('{"cbor": "00"}')


def test_is_blank():
    assert validators.is_blank(None)
    assert validators.is_blank("   ")
    assert not validators.is_blank(0)
    assert not validators.is_blank("123")
