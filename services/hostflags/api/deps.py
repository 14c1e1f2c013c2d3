"""
Dependency Injection for the service API.

Manage request handler dependencies using FastAPI Depends.
"""

import json
import time
from typing import Annotated
from fastapi import Depends, Request

from services.common.core.request_context import get_request_id, generate_request_id

from ..models import RequestContext
from ..services.handler import ExtractionHandler


# ==========================================
# 1. Service Accessors
# ==========================================


def get_extraction_handler(request: Request) -> ExtractionHandler:
    return request.app.state.extraction_handler


# Service Dependency Type Aliases
ExtractionHandlerDep = Annotated[ExtractionHandler, Depends(get_extraction_handler)]


# ==========================================
# 2. Request Context
# ==========================================


async def build_request_context(request: Request) -> RequestContext:
    """
    Build the handler's RequestContext from the incoming request.

    The middleware supplies the request ID and start time. A body that is not
    a JSON object decodes to an empty dict so it fails validation downstream.
    """
    raw = await request.body()
    try:
        body = json.loads(raw) if raw else {}
    except (ValueError, RecursionError):
        body = {}
    if not isinstance(body, dict):
        body = {}

    request_id = getattr(request.state, "request_id", None) or get_request_id()
    start_time = getattr(request.state, "start_time", None)

    return RequestContext(
        request_id=request_id or generate_request_id(),
        start_time=start_time if start_time is not None else time.perf_counter(),
        body=body,
    )


RequestContextDep = Annotated[RequestContext, Depends(build_request_context)]
