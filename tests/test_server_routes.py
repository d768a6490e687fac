import pytest
from fastapi.testclient import TestClient

from blockfrost_node import server as server_mod
from blockfrost_node.config import BlockfrostConfig
from blockfrost_node.credentials import BlockfrostCredentials
from blockfrost_node.metrics import MetricsRecorder
from blockfrost_node.node import BlockfrostNode
from blockfrost_node.operations import all_operations


@pytest.fixture
def client():
    return TestClient(server_mod.app)


class StubHttp:
    def __init__(self, result):
        self.result = result
        self.targets = []

    async def send(self, target):
        self.targets.append(target)
        return self.result

    async def aclose(self):
        return None


def _install_node(monkeypatch, http, seen=None):
    def http_factory(credentials):
        if seen is not None:
            seen.append(credentials)
        return http

    node = BlockfrostNode(
        sdk_factory=lambda project_id, network: object(),
        http_client_factory=http_factory,
        metrics=MetricsRecorder(),
    )
    monkeypatch.setattr(server_mod, "node", node)
    return node


def test_health_route(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert "X-Request-ID" in resp.headers


def test_metrics_counts_requests(client):
    client.get("/health")
    data = client.get("/metrics").json()
    assert data["requests"] >= 2


def test_operations_listing(client):
    rows = client.get("/operations").json()["operations"]
    assert len(rows) == len(all_operations())
    submit = next(r for r in rows if r["operation"] == "submitTransaction")
    assert submit["method"] == "POST"
    assert submit["path"] == "/tx/submit"
    assert submit["fields"] == ["transactionCbor"]
    utxos = next(r for r in rows if r["operation"] == "getUtxos")
    assert utxos["transport"] == "http"
    assert utxos["fields"] == ["count", "order", "page", "stakeAddress"]


def test_descriptions(client):
    node = client.get("/node/description").json()
    assert node["name"] == "blockfrost"
    credentials = client.get("/credentials/description").json()
    assert credentials["name"] == "blockfrostApi"
    assert [p["name"] for p in credentials["properties"]] == ["projectId", "network"]


def test_execute_route(client, monkeypatch):
    http = StubHttp({"epoch": 500})
    _install_node(monkeypatch, http)
    resp = client.post(
        "/execute",
        json={
            "credentials": {"projectId": "mainnetABC", "network": "mainnet"},
            "parameters": {"category": "epochs", "operation": "getLatestEpoch"},
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"items": [{"json": {"epoch": 500}}]}
    assert http.targets[0].path == "/epochs/latest"


def test_execute_route_reports_node_errors(client, monkeypatch):
    _install_node(monkeypatch, StubHttp({}))
    resp = client.post(
        "/execute",
        json={
            "credentials": {"projectId": "mainnetABC"},
            "parameters": {"category": "epochs", "operation": "getEpoch", "epochNumber": -1},
        },
    )
    assert resp.status_code == 502
    assert resp.json()["error"].startswith("Blockfrost API error: ")


@pytest.mark.parametrize(
    "body",
    [
        [1, 2],
        {"parameters": "epochs"},
        {"parameters": {}, "credentials": "abc"},
    ],
)
def test_execute_route_rejects_malformed_bodies(client, body):
    resp = client.post("/execute", json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_execute_route_rejects_invalid_json(client):
    resp = client.post("/execute", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_execute_route_uses_configured_credentials(client, monkeypatch):
    seen = []
    _install_node(monkeypatch, StubHttp([]), seen)
    monkeypatch.setattr(server_mod, "default_config", BlockfrostConfig(project_id="previewCfg", network="preview"))
    resp = client.post("/execute", json={"parameters": {"category": "mempool", "operation": "getMempool"}})
    assert resp.status_code == 200
    assert resp.json() == {"items": []}
    assert seen == [BlockfrostCredentials("previewCfg", "preview")]


def test_execute_route_without_any_credentials(client, monkeypatch):
    http = StubHttp([])
    _install_node(monkeypatch, http)
    monkeypatch.setattr(server_mod, "default_config", BlockfrostConfig(project_id=None))
    resp = client.post("/execute", json={"parameters": {"category": "mempool", "operation": "getMempool"}})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Blockfrost project ID is required"}
    assert http.targets == []
