import time

import httpx
import pytest
import pytest_asyncio
import respx
from fastapi.testclient import TestClient

from services.common.core.metrics import error_metrics
from services.hostflags.config import DEFAULT_USER_AGENT
from services.hostflags.models import RequestContext
from services.hostflags.services.fetcher import EmbedPageFetcher
from services.hostflags.services.handler import ExtractionHandler

EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}"


@pytest.fixture
def video_id():
    return "dQw4w9WgXcQ"


@pytest.fixture
def embed_url(video_id):
    return EMBED_URL_TEMPLATE.format(video_id=video_id)


@pytest.fixture
def embed_html():
    """Build an embed page around a ytcfg JSON snippet."""

    def _build(config_json: str = '{"encryptedHostFlags":"ABC123"}') -> str:
        return (
            "<html><head><script>"
            f"ytcfg.set({config_json});"
            "</script></head><body></body></html>"
        )

    return _build


@pytest.fixture
def make_context():
    def _build(body=None, request_id="req-1") -> RequestContext:
        return RequestContext(
            request_id=request_id, start_time=time.perf_counter(), body=body or {}
        )

    return _build


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest_asyncio.fixture
async def http_client():
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def fetcher(http_client):
    return EmbedPageFetcher(
        http_client, url_template=EMBED_URL_TEMPLATE, user_agent=DEFAULT_USER_AGENT
    )


@pytest.fixture
def handler(fetcher):
    return ExtractionHandler(fetcher)


@pytest.fixture
def client():
    from services.hostflags.main import app

    error_metrics.reset()
    with TestClient(app) as test_client:
        yield test_client
    error_metrics.reset()
