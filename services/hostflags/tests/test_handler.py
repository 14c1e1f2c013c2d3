"""
ExtractionHandler behavior: validation, fetch failure classification,
pattern extraction and the JSON envelope.
"""

import json
import logging
from unittest.mock import AsyncMock

import httpx
import pytest

from services.hostflags.models import (
    ExtractionSuccess,
    NotFoundFailure,
    UpstreamFailure,
    ValidationFailure,
)
from services.hostflags.services.handler import ExtractionHandler


def _json(response):
    return json.loads(response.body)


def _assert_envelope_headers(response, request_id="req-1"):
    assert response.headers["content-type"] == "application/json"
    assert response.headers["x-request-id"] == request_id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"video_id": ""},
        {"video_id": None},
        {"video_id": 123},
        {"videoId": "abc", "other": 1},
    ],
)
async def test_missing_video_id_returns_400_without_upstream_call(
    handler, respx_mock, make_context, body
):
    route = respx_mock.get(url__startswith="https://www.youtube.com/")

    response = await handler.handle(make_context(body))

    assert response.status_code == 400
    _assert_envelope_headers(response)
    payload = _json(response)
    assert payload["success"] is False
    assert payload["error"] == {
        "message": "video_id is required",
        "code": "MISSING_REQUIRED_PARAMS",
        "details": {"received": list(body.keys())},
        "requestId": "req-1",
    }
    assert payload["timestamp"].endswith("Z")
    assert route.call_count == 0


@pytest.mark.asyncio
async def test_validation_failure_does_not_touch_fetcher(make_context):
    fetcher = AsyncMock()
    handler = ExtractionHandler(fetcher)

    outcome = await handler.run(make_context({"unrelated": True}))

    assert outcome == ValidationFailure(received=["unrelated"])
    fetcher.fetch.assert_not_called()


@pytest.mark.asyncio
async def test_happy_path_returns_token(
    handler, respx_mock, make_context, video_id, embed_url, embed_html
):
    respx_mock.get(embed_url).mock(return_value=httpx.Response(200, text=embed_html()))

    response = await handler.handle(make_context({"video_id": video_id}))

    assert response.status_code == 200
    _assert_envelope_headers(response)
    payload = _json(response)
    assert list(payload) == [
        "encrypted_host_flags",
        "success",
        "timestamp",
        "processing_time_ms",
    ]
    assert payload["encrypted_host_flags"] == "ABC123"
    assert payload["success"] is True
    assert isinstance(payload["processing_time_ms"], int)
    assert payload["processing_time_ms"] >= 0


@pytest.mark.asyncio
async def test_pattern_tolerates_whitespace_around_colon(
    handler, respx_mock, make_context, video_id, embed_url, embed_html
):
    respx_mock.get(embed_url).mock(
        return_value=httpx.Response(200, text=embed_html('{"encryptedHostFlags" : "XYZ"}'))
    )

    outcome = await handler.run(make_context({"video_id": video_id}))

    assert isinstance(outcome, ExtractionSuccess)
    assert outcome.encrypted_host_flags == "XYZ"
    assert outcome.fetch_duration_ms >= 0


@pytest.mark.asyncio
async def test_missing_token_returns_404_and_warns(
    handler, respx_mock, make_context, video_id, embed_url, embed_html, caplog
):
    respx_mock.get(embed_url).mock(
        return_value=httpx.Response(200, text=embed_html('{"somethingElse":"1"}'))
    )
    caplog.set_level(logging.INFO, logger="hostflags.handler")

    response = await handler.handle(make_context({"video_id": video_id}))

    assert response.status_code == 404
    _assert_envelope_headers(response)
    payload = _json(response)
    assert payload["success"] is False
    assert payload["error"]["code"] == "FLAGS_NOT_FOUND"
    assert payload["error"]["message"] == "encryptedHostFlags not found"
    assert payload["error"]["details"] == {"videoId": video_id}

    levels = [r.levelno for r in caplog.records if r.name == "hostflags.handler"]
    assert logging.WARNING in levels
    assert logging.ERROR not in levels


@pytest.mark.asyncio
async def test_upstream_non_success_status_returns_500(
    handler, respx_mock, make_context, video_id, embed_url, caplog
):
    respx_mock.get(embed_url).mock(return_value=httpx.Response(500))
    caplog.set_level(logging.ERROR, logger="hostflags.handler")

    response = await handler.handle(make_context({"video_id": video_id}))

    assert response.status_code == 500
    _assert_envelope_headers(response)
    payload = _json(response)
    assert payload["error"] == {
        "message": "Failed to fetch encrypted host flags",
        "code": "FETCH_ERROR",
        "details": {"originalError": "Failed to fetch embed page: 500"},
        "requestId": "req-1",
    }
    errors = [getattr(r, "error", None) for r in caplog.records if r.levelno == logging.ERROR]
    assert "Failed to fetch embed page: 500" in errors


@pytest.mark.asyncio
async def test_upstream_not_found_status_is_a_fetch_error(
    handler, respx_mock, make_context, video_id, embed_url
):
    respx_mock.get(embed_url).mock(return_value=httpx.Response(404, text="missing"))

    outcome = await handler.run(make_context({"video_id": video_id}))

    assert outcome == UpstreamFailure(message="Failed to fetch embed page: 404")


@pytest.mark.asyncio
async def test_upstream_transport_error_returns_500(
    handler, respx_mock, make_context, video_id, embed_url
):
    respx_mock.get(embed_url).mock(side_effect=httpx.ConnectError("connection refused"))

    response = await handler.handle(make_context({"video_id": video_id}))

    assert response.status_code == 500
    assert _json(response)["error"]["details"] == {"originalError": "connection refused"}


@pytest.mark.asyncio
async def test_exception_without_message_reports_unknown_error(make_context):
    fetcher = AsyncMock()
    fetcher.fetch.side_effect = RuntimeError()
    handler = ExtractionHandler(fetcher)

    response = await handler.handle(make_context({"video_id": "abc"}))

    assert response.status_code == 500
    assert _json(response)["error"]["details"] == {"originalError": "Unknown error"}


@pytest.mark.asyncio
async def test_unexpected_exception_is_contained(make_context):
    fetcher = AsyncMock()
    fetcher.fetch.return_value = None  # not a str; extraction raises TypeError
    handler = ExtractionHandler(fetcher)

    outcome = await handler.run(make_context({"video_id": "abc"}))

    assert isinstance(outcome, UpstreamFailure)
    assert outcome.message


@pytest.mark.asyncio
async def test_repeated_calls_are_idempotent(
    handler, respx_mock, make_context, video_id, embed_url, embed_html
):
    respx_mock.get(embed_url).mock(return_value=httpx.Response(200, text=embed_html()))

    first = _json(await handler.handle(make_context({"video_id": video_id})))
    second = _json(await handler.handle(make_context({"video_id": video_id})))

    for payload in (first, second):
        payload.pop("timestamp")
        payload.pop("processing_time_ms")
    assert first == second == {"encrypted_host_flags": "ABC123", "success": True}


def test_render_maps_each_failure_to_its_status(make_context):
    handler = ExtractionHandler(AsyncMock())
    ctx = make_context(request_id="req-9")

    cases = [
        (ValidationFailure(received=[]), 400),
        (NotFoundFailure(video_id="v"), 404),
        (UpstreamFailure(message="boom"), 500),
    ]
    for outcome, status in cases:
        response = handler.render(outcome, ctx)
        assert response.status_code == status
        _assert_envelope_headers(response, request_id="req-9")
        assert list(_json(response)) == ["success", "error", "timestamp"]
