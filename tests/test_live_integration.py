import os

import pytest
import pytest_asyncio

from blockfrost_node.blockfrost_api import BlockfrostHttpClient, EndpointTarget, SdkGateway, create_sdk
from blockfrost_node.dispatcher import Dispatcher
from blockfrost_node.operations import fallback_methods


LIVE = os.getenv("LIVE_BLOCKFROST") in {"1", "true", "yes"}
PROJECT_ID = os.getenv("BLOCKFROST_PROJECT_ID", "")
NETWORK = os.getenv("BLOCKFROST_NETWORK", "mainnet")


pytestmark = pytest.mark.skipif(
    not (LIVE and PROJECT_ID), reason="Live Blockfrost integration tests are disabled"
)


@pytest_asyncio.fixture
async def live_dispatcher():
    http = BlockfrostHttpClient(PROJECT_ID, NETWORK)
    gateway = SdkGateway(create_sdk(PROJECT_ID, NETWORK), fallback_methods())
    yield Dispatcher(gateway, http, network=NETWORK)
    await http.aclose()


@pytest.mark.asyncio
async def test_live_health(live_dispatcher):
    items = await live_dispatcher.dispatch("health", "health", {})
    assert items[0]["is_healthy"] is True


@pytest.mark.asyncio
async def test_live_latest_block(live_dispatcher):
    items = await live_dispatcher.dispatch("blocks", "getLatestBlock", {})
    assert len(items) == 1
    assert "hash" in items[0]


@pytest.mark.asyncio
async def test_live_assets_page(live_dispatcher):
    items = await live_dispatcher.dispatch("assets", "getAssets", {"count": 2})
    assert len(items) <= 2


@pytest.mark.asyncio
async def test_live_direct_client():
    http = BlockfrostHttpClient(PROJECT_ID, NETWORK)
    try:
        clock = await http.send(EndpointTarget("/health/clock"))
    finally:
        await http.aclose()
    assert "server_time" in clock
