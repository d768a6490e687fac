"""Health operations (vendor SDK)."""

from blockfrost_node.operations.definitions import OperationDefinition

CATEGORY = ("health", "Health")

OPERATIONS = [
    OperationDefinition(
        "health",
        "root",
        "Root Endpoint",
        "Get information pointing to the documentation",
        path="/",
        sdk_method="root",
    ),
    OperationDefinition(
        "health",
        "health",
        "Backend Health Status",
        "Get backend health status",
        path="/health",
        sdk_method="health",
    ),
    OperationDefinition(
        "health",
        "clock",
        "Current Backend Time",
        "Get current backend UNIX time",
        path="/health/clock",
        sdk_method="clock",
    ),
]
