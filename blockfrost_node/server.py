"""FastAPI application exposing the Blockfrost node over HTTP for local hosting and testing."""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from blockfrost_node.blockfrost_api import InvalidInputError
from blockfrost_node.config import default_config
from blockfrost_node.credentials import CREDENTIAL_DESCRIPTION, BlockfrostCredentials
from blockfrost_node.metrics import default_metrics
from blockfrost_node.node import BlockfrostNode, NodeApiError
from blockfrost_node.operations import all_operations
from blockfrost_node.schema import visible_fields

logger = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("operation", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging() -> None:
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    if default_config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler])
    else:
        logging.basicConfig(level=level)


configure_logging()

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = "0.1.0"

node = BlockfrostNode()

app = FastAPI(
    title="Blockfrost Node",
    description="Blockfrost Cardano API exposed as a workflow node.",
    version=APP_VERSION,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.get("/node/description")
async def node_description() -> JSONResponse:
    return JSONResponse(content=node.description)


@app.get("/credentials/description")
async def credentials_description() -> JSONResponse:
    return JSONResponse(content=CREDENTIAL_DESCRIPTION)


@app.get("/operations")
async def operations() -> JSONResponse:
    """List every (category, operation) pair with its endpoint and visible fields."""
    properties = node.description["properties"]
    rows: List[Dict[str, Any]] = [
        {
            "category": op.category,
            "operation": op.operation,
            "name": op.name,
            "method": op.method,
            "path": op.path,
            "transport": op.transport,
            "fields": sorted(visible_fields(properties, op.category, op.operation)),
            "required": list(op.required),
        }
        for op in all_operations()
    ]
    return JSONResponse(content={"operations": rows})


@app.post("/execute")
async def execute(request: Request) -> JSONResponse:
    """
    Run one operation.

    Body: ``{"credentials": {...}, "parameters": {"category": ..., "operation": ..., ...}}``.
    Credentials default to the configured project ID and network.
    """
    request_id = getattr(request.state, "request_id", None)
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body."})
    if not isinstance(body, dict):
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body."})

    parameters = body.get("parameters")
    if not isinstance(parameters, dict):
        return JSONResponse(status_code=400, content={"error": "parameters must be an object."})
    credentials = body.get("credentials")
    if credentials is None:
        try:
            credentials = BlockfrostCredentials.from_config(default_config).as_mapping()
        except InvalidInputError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
    if not isinstance(credentials, dict):
        return JSONResponse(status_code=400, content={"error": "credentials must be an object."})

    try:
        batches = await node.execute(credentials, parameters)
    except NodeApiError as exc:
        logger.debug("execute failed request_id=%s", request_id, extra={"request_id": request_id})
        return JSONResponse(status_code=502, content={"error": str(exc)})
    return JSONResponse(content={"items": batches[0]})


# Run with: uvicorn blockfrost_node.server:app --reload
