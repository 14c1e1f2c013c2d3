"""
Service configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pydantic import Field
from services.common.core.config import BaseAppConfig

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class HostFlagsConfig(BaseAppConfig):
    """
    Configuration management for the encrypted host flags service.
    """

    # Server settings
    UVICORN_BIND_ADDR: str = Field(default="0.0.0.0:8000", description="Listen address")

    # Upstream embed page
    EMBED_URL_TEMPLATE: str = Field(
        default="https://www.youtube.com/embed/{video_id}",
        description="Embed page URL, {video_id} is substituted",
    )
    UPSTREAM_USER_AGENT: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent sent to the upstream"
    )
    UPSTREAM_TIMEOUT: float = Field(
        default=10.0, gt=0, description="Upstream request timeout (seconds)"
    )

    # FastAPI settings
    root_path: str = Field(default="", description="API root path (for proxy)")

    # model_config is inherited


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = HostFlagsConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
