"""
Exception handlers translating Pageflow errors into JSON responses.

Error Response Format:
{
    "error": {
        "status_code": 404,
        "error_code": "REGISTRY_NOT_FOUND",
        "message": "Unknown theme 'rainbow'",
        "type": "Not Found",
        "details": {"registry": "theme", "name": "rainbow"},
        "path": "/entries/my-story"
    }
}
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from pageflow.exceptions import ErrorCode, PageflowError

logger = logging.getLogger(__name__)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        403: "Forbidden",
        404: "Not Found",
        409: "Conflict",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if error_code:
        error_response["error"]["error_code"] = error_code.value if isinstance(error_code, ErrorCode) else error_code

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


async def pageflow_exception_handler(request: Request, exc: PageflowError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "PageflowError: %s",
        exc.message,
        extra={"status_code": exc.status_code, "error_code": exc.error_code.value, "path": request.url.path},
    )

    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details or None,
        path=request.url.path,
    )
