"""MCP-style tool protocol module.

This module contains the protocol pieces a transport wraps:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- The tools/list and tools/call dispatcher
"""

from .dispatch import call_tool, handle_jsonrpc
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS, TOOL_PARAMS

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    "TOOL_PARAMS",
    # Dispatch
    "call_tool",
    "handle_jsonrpc",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
