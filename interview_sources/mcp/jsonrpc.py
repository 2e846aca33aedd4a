"""JSON-RPC 2.0 helpers for the tool dispatcher.

Request and response envelopes follow jsonrpc.org (version "2.0").
"""

from typing import Any

# Reserved error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Success envelope echoing the request id."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str, data: Any = None) -> dict:
    """Error envelope; ``data`` is omitted when None.

    Args:
        id: Request ID (None for parse errors)
        code: One of the error codes above
        message: Short description shown to the caller
        data: Optional structured detail (e.g. validation errors)
    """
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": id, "error": error}
