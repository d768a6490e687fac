"""Usage metrics operations (vendor SDK)."""

from blockfrost_node.operations.definitions import OperationDefinition

CATEGORY = ("metrics", "Metrics")

OPERATIONS = [
    OperationDefinition(
        "metrics",
        "usage",
        "Usage Metrics",
        "History of your Blockfrost usage metrics in the past 30 days",
        path="/metrics",
        sdk_method="metrics",
    ),
    OperationDefinition(
        "metrics",
        "endpoints",
        "Endpoint Usage Metrics",
        "History of your Blockfrost usage metrics per endpoint in the past 30 days",
        path="/metrics/endpoints",
        sdk_method="metrics_endpoints",
    ),
]
