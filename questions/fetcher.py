"""
HTTP retrieval of the upstream Atom feed for one search term.
"""
from __future__ import annotations

import logging
import time
from typing import Dict, List
from urllib.parse import quote, urlencode

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from questions.errors import FetchError
from questions.settings import DEFAULT_FEED_BASE_URL, FeedSettings

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class FeedFetcher:
    """
    Performs exactly one GET per ``fetch`` call. The session only lives for the
    duration of that call, so no connection or header state leaks between
    searches.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_FEED_BASE_URL,
        *,
        feed_format: str = "atom",
        sort: str = "relevance",
        status: str = "unanswered",
        timeout: float = 15.0,
        max_retries: int = 1,
        user_agent: str = "QuestionSearch/1.0",
    ) -> None:
        self.base_url = base_url
        self.feed_format = feed_format
        self.sort = sort
        self.status = status
        self.timeout = timeout
        self.max_retries = max_retries
        self.user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: FeedSettings) -> "FeedFetcher":
        return cls(
            settings.feed_base_url,
            feed_format=settings.feed_format,
            sort=settings.feed_sort,
            status=settings.feed_status,
            timeout=settings.timeout_seconds,
            max_retries=settings.max_retries,
            user_agent=settings.user_agent,
        )

    def build_url(self, term: str) -> str:
        params: Dict[str, str] = {
            "format": self.feed_format,
            "sort": self.sort,
            "status": self.status,
            "term": term or "",
        }
        return f"{self.base_url}?{urlencode(params, quote_via=quote, safe='')}"

    def fetch(self, term: str) -> bytes:
        url = self.build_url(term)
        # ``timeout`` bounds each socket read; the deadline bounds the whole call.
        deadline = time.monotonic() + self.timeout
        with self._build_session() as session:
            try:
                response = session.get(url, timeout=self.timeout, stream=True)
            except requests.Timeout as exc:
                logger.warning("Feed request timed out after %ss: %s", self.timeout, url)
                raise FetchError("Timed out fetching feed") from exc
            except requests.RequestException as exc:
                logger.warning("Feed request failed for %s: %s", url, exc)
                raise FetchError("Could not reach feed") from exc

            with response:
                if not 200 <= response.status_code < 300:
                    logger.warning("Feed returned HTTP %s for %s", response.status_code, url)
                    raise FetchError(
                        f"Feed returned HTTP {response.status_code}",
                        status_code=response.status_code,
                    )
                payload = self._read_body(response, deadline, url)
        logger.debug("Fetched %d bytes for term %r", len(payload), term)
        return payload

    def _read_body(self, response: requests.Response, deadline: float, url: str) -> bytes:
        chunks: List[bytes] = []
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    logger.warning("Feed body exceeded %ss deadline: %s", self.timeout, url)
                    raise FetchError("Timed out fetching feed")
        except requests.RequestException as exc:
            logger.warning("Feed body read failed for %s: %s", url, exc)
            raise FetchError("Could not read feed") from exc
        return b"".join(chunks)

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        # Only connection failures are retried; a response that was read is final.
        retry = Retry(
            total=self.max_retries,
            connect=self.max_retries,
            read=0,
            status=0,
            backoff_factor=0.6,
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/atom+xml,application/xml;q=0.9,*/*;q=0.8",
            }
        )
        return session
