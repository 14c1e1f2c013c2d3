"""
Embed Page Fetcher

Issues the single upstream GET for a video's embed page and returns its HTML.
"""

import logging

import httpx

from services.hostflags.core.exceptions import UpstreamFetchError

logger = logging.getLogger("hostflags.fetcher")


class EmbedPageFetcher:
    def __init__(self, client: httpx.AsyncClient, url_template: str, user_agent: str):
        """
        Args:
            client: Shared httpx.AsyncClient
            url_template: Embed page URL containing a {video_id} placeholder
            user_agent: User-Agent header sent upstream
        """
        self.client = client
        self.url_template = url_template
        self.user_agent = user_agent

    def build_url(self, video_id: str) -> str:
        return self.url_template.format(video_id=video_id)

    async def fetch(self, video_id: str) -> str:
        """
        Fetch the embed page for ``video_id``.

        Returns:
            Response body text

        Raises:
            UpstreamFetchError: non-2xx status or transport failure
        """
        url = self.build_url(video_id)

        try:
            response = await self.client.get(
                url,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            )
        except httpx.HTTPError as e:
            logger.debug(
                "Embed page request failed",
                extra={"target_url": url, "error_type": type(e).__name__},
            )
            raise UpstreamFetchError(str(e)) from e

        if not response.is_success:
            raise UpstreamFetchError(
                f"Failed to fetch embed page: {response.status_code}",
                status_code=response.status_code,
            )

        return response.text
