"""
Custom exception classes and framework-level exception handlers.
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("hostflags.exceptions")


class UpstreamFetchError(Exception):
    """Raised when the embed page cannot be fetched."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


# ===========================================
# Exception Handlers
# ===========================================


def _request_id_headers(request: Request) -> dict:
    request_id = getattr(request.state, "request_id", None)
    return {"X-Request-ID": request_id} if request_id else {}


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unhandled exceptions.
    """
    error_detail = str(exc)
    logger.error(
        f"Global exception handler caught: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    # Runs outside the request middleware, so the request ID header is set here.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "detail": error_detail},
        headers=_request_id_headers(request),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTPException.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )
