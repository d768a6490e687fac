"""Minimal sanity checks for the Blockfrost node against a live project."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from blockfrost_node.config import default_config  # noqa: E402
from blockfrost_node.node import BlockfrostNode, NodeApiError  # noqa: E402

# Public mainnet stake address; override via env.
SAMPLE_STAKE_ADDRESS = os.getenv(
    "BLOCKFROST_SAMPLE_STAKE_ADDRESS", "stake1u9ylzsgxaa6xctf4juup682ar3juj85n8tx3hthnljg47zctvm3rc"
)
# Opt-in to the paged account queries (consume more of the daily quota).
RUN_ACCOUNT_QUERIES = os.getenv("RUN_ACCOUNT_SANITY", "false").lower() in {"1", "true", "yes"}


async def run(node: BlockfrostNode, credentials: dict, label: str, **parameters) -> None:
    try:
        batches = await node.execute(credentials, parameters)
    except NodeApiError as exc:
        print(f"{label}: {exc}")
        return
    print(f"{label}:", batches[0][:3])


async def main() -> None:
    if not default_config.project_id:
        print("Set BLOCKFROST_PROJECT_ID or BLOCKFROST_PROJECT_ID_FILE first.")
        return
    credentials = {"projectId": default_config.project_id, "network": default_config.network}
    node = BlockfrostNode()

    await run(node, credentials, "Health", category="health", operation="health")
    await run(node, credentials, "Clock", category="health", operation="clock")
    await run(node, credentials, "Latest block", category="blocks", operation="getLatestBlock")
    await run(node, credentials, "Latest epoch", category="epochs", operation="getLatestEpoch")
    await run(node, credentials, "Network eras", category="network", operation="getNetworkEras")
    await run(node, credentials, "Assets (count 3)", category="assets", operation="getAssets", count=3)

    if RUN_ACCOUNT_QUERIES and default_config.network == "mainnet":
        await run(node, credentials, "Account", category="accounts", operation="getAccount", stakeAddress=SAMPLE_STAKE_ADDRESS)
        await run(
            node,
            credentials,
            "Account UTXOs",
            category="accounts",
            operation="getUtxos",
            stakeAddress=SAMPLE_STAKE_ADDRESS,
            count=3,
        )


if __name__ == "__main__":
    asyncio.run(main())
