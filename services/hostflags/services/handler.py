"""
Extraction Handler

validate -> fetch -> extract -> respond, for one request.
Every request ends in exactly one ExtractionOutcome, which ``render`` maps to
a JSON response.
"""

import logging

from fastapi.responses import JSONResponse

from services.common.core.timing import elapsed_ms, measure_time_async
from services.hostflags.core.exceptions import UpstreamFetchError
from services.hostflags.core.extraction import extract_encrypted_host_flags
from services.hostflags.core.utils import (
    create_api_error,
    utc_timestamp,
    validate_required_fields,
)
from services.hostflags.models import (
    ErrorResponse,
    ExtractionFailure,
    ExtractionOutcome,
    ExtractionSuccess,
    GetHostFlagsRequest,
    HostFlagsResponse,
    NotFoundFailure,
    RequestContext,
    UpstreamFailure,
    ValidationFailure,
)
from services.hostflags.services.fetcher import EmbedPageFetcher

logger = logging.getLogger("hostflags.handler")

REQUIRED_FIELDS = ("video_id",)
UNKNOWN_ERROR = "Unknown error"


class ExtractionHandler:
    def __init__(self, fetcher: EmbedPageFetcher):
        self.fetcher = fetcher

    async def handle(self, ctx: RequestContext) -> JSONResponse:
        """Process one request. Never raises."""
        return self.render(await self.run(ctx), ctx)

    async def run(self, ctx: RequestContext) -> ExtractionOutcome:
        if validate_required_fields(ctx.body, REQUIRED_FIELDS):
            return ValidationFailure(received=list(ctx.body.keys()))

        request = GetHostFlagsRequest(video_id=ctx.body["video_id"])
        logger.info(
            "Fetching encrypted host flags",
            extra={"request_id": ctx.request_id, "video_id": request.video_id},
        )

        try:
            timed = await measure_time_async(lambda: self.fetcher.fetch(request.video_id))
            encrypted_host_flags = extract_encrypted_host_flags(timed.result)
        except UpstreamFetchError as e:
            return self._upstream_failure(ctx, e)
        except Exception as e:
            return self._upstream_failure(ctx, e, exc_info=True)

        if encrypted_host_flags is None:
            logger.warning(
                "encryptedHostFlags not found in embed page",
                extra={"request_id": ctx.request_id, "video_id": request.video_id},
            )
            return NotFoundFailure(video_id=request.video_id)

        processing_time_ms = elapsed_ms(ctx.start_time)
        logger.info(
            "Encrypted host flags fetched successfully",
            extra={
                "request_id": ctx.request_id,
                "fetch_duration": f"{timed.duration_ms:.2f}ms",
                "processing_time_ms": processing_time_ms,
            },
        )
        return ExtractionSuccess(
            encrypted_host_flags=encrypted_host_flags,
            fetch_duration_ms=timed.duration_ms,
            processing_time_ms=processing_time_ms,
        )

    def render(self, outcome: ExtractionOutcome, ctx: RequestContext) -> JSONResponse:
        headers = {"X-Request-ID": ctx.request_id}

        if isinstance(outcome, ExtractionSuccess):
            body = HostFlagsResponse(
                encrypted_host_flags=outcome.encrypted_host_flags,
                timestamp=utc_timestamp(),
                processing_time_ms=outcome.processing_time_ms,
            )
            return JSONResponse(status_code=200, content=body.model_dump(), headers=headers)

        body = ErrorResponse(error=self._api_error(outcome, ctx), timestamp=utc_timestamp())
        return JSONResponse(
            status_code=outcome.status_code,
            content=body.model_dump(mode="json", by_alias=True),
            headers=headers,
        )

    def _api_error(self, outcome: ExtractionFailure, ctx: RequestContext):
        if isinstance(outcome, ValidationFailure):
            message, details = "video_id is required", {"received": outcome.received}
        elif isinstance(outcome, NotFoundFailure):
            message, details = "encryptedHostFlags not found", {"videoId": outcome.video_id}
        else:
            message = "Failed to fetch encrypted host flags"
            details = {"originalError": outcome.message}
        return create_api_error(message, outcome.code, details, ctx.request_id)

    def _upstream_failure(
        self, ctx: RequestContext, exc: Exception, exc_info: bool = False
    ) -> UpstreamFailure:
        message = str(exc) or UNKNOWN_ERROR
        logger.error(
            "Get encrypted host flags handler failed",
            extra={"request_id": ctx.request_id, "error": message},
            exc_info=exc_info,
        )
        return UpstreamFailure(message=message)
