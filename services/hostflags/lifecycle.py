"""
Where: services/hostflags/lifecycle.py
What: Service startup/shutdown orchestration for shared resources.
Why: Keep main.py focused on app assembly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from services.common.core.http_client import HttpClientFactory

from .config import HostFlagsConfig
from .services.fetcher import EmbedPageFetcher
from .services.handler import ExtractionHandler

logger = logging.getLogger("hostflags.main")


@asynccontextmanager
async def manage_lifespan(app: FastAPI, service_config: HostFlagsConfig) -> AsyncIterator[None]:
    """Manage application lifecycle."""
    factory = HttpClientFactory(service_config)
    client = factory.create_async_client(timeout=service_config.UPSTREAM_TIMEOUT)

    try:
        fetcher = EmbedPageFetcher(
            client,
            url_template=service_config.EMBED_URL_TEMPLATE,
            user_agent=service_config.UPSTREAM_USER_AGENT,
        )

        app.state.extraction_handler = ExtractionHandler(fetcher)

        logger.info(
            "Service initialized with shared resources.",
            extra={
                "embed_url_template": service_config.EMBED_URL_TEMPLATE,
                "upstream_timeout": service_config.UPSTREAM_TIMEOUT,
            },
        )
        yield
    finally:
        logger.info("Service shutting down, closing http client.")
        await client.aclose()
