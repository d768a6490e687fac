import pytest

from blockfrost_node.blockfrost_api import InvalidInputError, NotFoundError
from blockfrost_node.credentials import BlockfrostCredentials
from blockfrost_node.metrics import MetricsRecorder
from blockfrost_node.node import ERROR_PREFIX, BlockfrostNode, NodeApiError


class StubHttp:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.targets = []
        self.closed = False

    async def send(self, target):
        self.targets.append(target)
        if self.exc is not None:
            raise self.exc
        return self.result

    async def aclose(self):
        self.closed = True


class StubSdk:
    def root(self, **_kwargs):
        return {"url": "https://blockfrost.io/", "version": "0.1.0"}

    def genesis(self, **_kwargs):
        return {"network_magic": 1, "epoch_length": 432000}


CREDENTIALS = {"projectId": "preprodXYZ", "network": "preprod"}


def _node(http, sdk=None, metrics=None):
    seen = {}

    def sdk_factory(project_id, network):
        seen["sdk"] = (project_id, network)
        return sdk or StubSdk()

    def http_factory(credentials):
        seen["http"] = credentials
        return http

    node = BlockfrostNode(sdk_factory=sdk_factory, http_client_factory=http_factory, metrics=metrics or MetricsRecorder())
    return node, seen


@pytest.mark.asyncio
async def test_execute_http_operation_returns_one_batch():
    http = StubHttp([{"tx_hash": "aa"}, {"tx_hash": "bb"}])
    node, seen = _node(http)
    result = await node.execute(
        CREDENTIALS, {"category": "blocks", "operation": "getBlockTransactions", "hashOrNumber": "42"}
    )
    assert result == [[{"json": {"tx_hash": "aa"}}, {"json": {"tx_hash": "bb"}}]]
    assert http.targets[0].path == "/blocks/42/txs"
    assert http.closed is True
    assert seen["sdk"] == ("preprodXYZ", "preprod")
    assert seen["http"] == BlockfrostCredentials("preprodXYZ", "preprod")


@pytest.mark.asyncio
async def test_execute_sdk_operation():
    http = StubHttp()
    node, _ = _node(http)
    result = await node.execute(CREDENTIALS, {"category": "ledger", "operation": "getGenesis"})
    assert result == [[{"json": {"network_magic": 1, "epoch_length": 432000}}]]
    assert http.targets == []


@pytest.mark.asyncio
async def test_scalar_response_is_wrapped():
    http = StubHttp("d8799f")
    node, _ = _node(http)
    result = await node.execute(CREDENTIALS, {"category": "scripts", "operation": "getDatumCbor", "datumHash": "db58"})
    assert result == [[{"json": {"result": "d8799f"}}]]


@pytest.mark.asyncio
async def test_operation_defaults_to_first_of_category():
    node, _ = _node(StubHttp())
    result = await node.execute(CREDENTIALS, {"category": "health"})
    assert result == [[{"json": {"url": "https://blockfrost.io/", "version": "0.1.0"}}]]


@pytest.mark.asyncio
async def test_upstream_error_is_prefixed_and_chained():
    metrics = MetricsRecorder()
    http = StubHttp(exc=NotFoundError("HTTP 404: The requested component has not been found.", status_code=404))
    node, _ = _node(http, metrics=metrics)
    with pytest.raises(NodeApiError) as excinfo:
        await node.execute(CREDENTIALS, {"category": "blocks", "operation": "getBlock", "hashOrNumber": "missing"})
    assert str(excinfo.value) == ERROR_PREFIX + "HTTP 404: The requested component has not been found."
    assert isinstance(excinfo.value.__cause__, NotFoundError)
    assert http.closed is True
    assert metrics.snapshot()["operation_error"] == {"blocks.getBlock": 1}


@pytest.mark.asyncio
async def test_input_errors_surface_as_node_errors():
    http = StubHttp()
    node, _ = _node(http)
    with pytest.raises(NodeApiError) as excinfo:
        await node.execute(CREDENTIALS, {"category": "blocks", "operation": "getBlockInSlot", "slotNumber": -3})
    assert str(excinfo.value).startswith(ERROR_PREFIX)
    assert isinstance(excinfo.value.__cause__, InvalidInputError)
    assert http.targets == []


@pytest.mark.asyncio
async def test_unknown_category_is_reported():
    node, _ = _node(StubHttp())
    with pytest.raises(NodeApiError) as excinfo:
        await node.execute(CREDENTIALS, {"category": "wallets", "operation": "getWallet"})
    assert str(excinfo.value) == ERROR_PREFIX + "Category wallets not implemented yet"


@pytest.mark.parametrize(
    "credentials",
    [{}, {"projectId": "   "}, {"projectId": "abc", "network": "testnet"}],
)
@pytest.mark.asyncio
async def test_invalid_credentials(credentials):
    node, seen = _node(StubHttp())
    with pytest.raises(NodeApiError):
        await node.execute(credentials, {"category": "health", "operation": "health"})
    assert "sdk" not in seen


@pytest.mark.asyncio
async def test_unexpected_exception_is_wrapped():
    node, _ = _node(StubHttp(exc=RuntimeError("socket closed")))
    with pytest.raises(NodeApiError) as excinfo:
        await node.execute(CREDENTIALS, {"category": "mempool", "operation": "getMempool"})
    assert str(excinfo.value) == ERROR_PREFIX + "socket closed"


@pytest.mark.asyncio
async def test_success_metrics():
    metrics = MetricsRecorder()
    node, _ = _node(StubHttp([]), metrics=metrics)
    await node.execute(CREDENTIALS, {"category": "assets", "operation": "getAssets"})
    assert metrics.snapshot()["operation_success"] == {"assets.getAssets": 1}


def test_description():
    description = BlockfrostNode.description
    assert description["displayName"] == "Blockfrost"
    assert description["credentials"] == [{"name": "blockfrostApi", "required": True}]
    assert description["properties"][0]["name"] == "category"


def test_credentials_repr_masks_project_id():
    credentials = BlockfrostCredentials.from_mapping({"projectId": " secret ", "network": "preview"})
    assert credentials.project_id == "secret"
    assert "secret" not in repr(credentials)


def test_credentials_from_config_round_trip():
    from blockfrost_node.config import BlockfrostConfig

    credentials = BlockfrostCredentials.from_config(BlockfrostConfig(project_id="cfgKey", network="preprod"))
    assert credentials.as_mapping() == {"projectId": "cfgKey", "network": "preprod"}
    assert BlockfrostCredentials.from_mapping(credentials.as_mapping()) == credentials
