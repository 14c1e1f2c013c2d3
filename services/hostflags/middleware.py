"""
Where: services/hostflags/middleware.py
What: HTTP middleware for request ID propagation and access logging.
Why: Isolate cross-cutting request concerns from app assembly.
"""

import logging
import time

from fastapi import Request

from services.common.core.request_context import clear_request_id, resolve_request_id

logger = logging.getLogger("hostflags.main")


async def request_context_middleware(request: Request, call_next):
    """Middleware for X-Request-ID propagation and structured access logging."""
    start_time = time.perf_counter()
    req_id = resolve_request_id(request.headers.get("X-Request-ID"))

    request.state.request_id = req_id
    request.state.start_time = start_time

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = req_id

        process_time_ms = round((time.perf_counter() - start_time) * 1000, 2)

        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": req_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "latency_ms": process_time_ms,
                "user_agent": request.headers.get("user-agent"),
                "client_ip": request.client.host if request.client else None,
            },
        )

        return response
    finally:
        clear_request_id()
