"""JSON-RPC method dispatch for tools/list and tools/call.

Transport-agnostic: takes one decoded request object and returns the
response object. Wrapping it in a transport is left to the caller.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from ..engine.handlers import HANDLERS, HandlerContext
from ..models import ToolCallRequest
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS, TOOL_PARAMS

logger = logging.getLogger(__name__)


def _validation_details(error: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
        for e in error.errors()
    ]


async def call_tool(params: dict[str, Any], ctx: HandlerContext) -> dict:
    """Run a tool and wrap its data as MCP text content.

    Raises:
        ValidationError: If the tool name or its arguments are invalid
    """
    request = ToolCallRequest.model_validate(params)
    arguments = TOOL_PARAMS[request.name].model_validate(request.arguments)
    result = await HANDLERS[request.name](arguments, ctx)
    return {
        "content": [{"type": "text", "text": json.dumps(result.data, indent=2)}],
        "isError": "error" in result.data,
    }


async def handle_jsonrpc(message: Any, ctx: HandlerContext) -> dict:
    """Dispatch one JSON-RPC 2.0 request.

    Args:
        message: Decoded request object
        ctx: Handler context holding the index

    Returns:
        JSON-RPC response (success or error)
    """
    if not isinstance(message, dict) or message.get("jsonrpc") != "2.0":
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid JSON-RPC 2.0 request")

    request_id = message.get("id")
    method = message.get("method")
    params = message.get("params") or {}

    if not isinstance(method, str) or not isinstance(params, dict):
        return jsonrpc_error(request_id, INVALID_REQUEST, "Invalid JSON-RPC 2.0 request")

    if method == "tools/list":
        return jsonrpc_response(request_id, {"tools": TOOL_DEFINITIONS})

    if method != "tools/call":
        return jsonrpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    try:
        result = await call_tool(params, ctx)
    except ValidationError as e:
        return jsonrpc_error(
            request_id,
            INVALID_PARAMS,
            f"Invalid parameter for tool '{params.get('name')}'",
            _validation_details(e),
        )
    except Exception as e:
        logger.error(f"Tool execution failed: {e}", exc_info=True)
        return jsonrpc_error(
            request_id, INTERNAL_ERROR, "Tool execution failed. Please try again."
        )

    return jsonrpc_response(request_id, result)
