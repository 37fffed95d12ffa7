"""DMC river water level client for the public GitHub data mirror."""

from typing import Optional

import httpx
from loguru import logger

from floodwatch.core.errors import DetailUnavailableError, UpstreamFetchError
from floodwatch.utils.config import settings


def blocks_path(date_str: str, doc_id: str, detail_file: str = "blocks.json") -> str:
    """Relative path of a report's detail payload, e.g. 2020s/2025/<doc_id>/blocks.json."""
    year = date_str[:4]
    decade = f"{year[:3]}0s"
    return f"{decade}/{year}/{doc_id}/{detail_file}"


class DMCClient:
    """Client for the DMC report index and per-report detail blocks."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or settings.dmc.base_url).rstrip("/")
        self.timeout = timeout or settings.dmc.timeout_seconds
        self.index_file = settings.dmc.index_file
        self.detail_file = settings.dmc.detail_file
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self.transport)

    def index_url(self) -> str:
        return f"{self.base_url}/{self.index_file}"

    def blocks_url(self, date_str: str, doc_id: str) -> str:
        return f"{self.base_url}/{blocks_path(date_str, doc_id, self.detail_file)}"

    def fetch_index(self) -> str:
        """Fetch the raw TSV document index."""
        url = self.index_url()
        logger.info("Fetching latest DMC data...")
        try:
            with self._client() as client:
                resp = client.get(url)
                resp.raise_for_status()
                return resp.text
        except httpx.HTTPStatusError as e:
            logger.error(f"Index fetch failed: {e.response.status_code}")
            raise UpstreamFetchError(
                f"Failed to fetch DMC data: {e.response.status_code}",
                url=url,
                status=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Index fetch failed: {e}")
            raise UpstreamFetchError(f"Failed to fetch DMC data: {e}", url=url) from e

    def fetch_blocks(self, date_str: str, doc_id: str) -> list:
        """Fetch the detail blocks of one report. Only the payload shape is checked."""
        url = self.blocks_url(date_str, doc_id)
        logger.info(f"Fetching blocks data from: {url}")
        try:
            with self._client() as client:
                resp = client.get(url)
                resp.raise_for_status()
                blocks = resp.json()
        except httpx.HTTPError as e:
            logger.warning(f"Could not fetch detailed data: {e}")
            raise DetailUnavailableError("Detailed data not available") from e
        except ValueError as e:
            logger.warning(f"Detail payload is not valid JSON: {e}")
            raise DetailUnavailableError("Detailed data not available") from e

        if not isinstance(blocks, list):
            logger.warning(f"Unexpected detail payload type: {type(blocks).__name__}")
            raise DetailUnavailableError("Detailed data not available")

        logger.info(f"Successfully fetched {len(blocks)} data blocks")
        return blocks
