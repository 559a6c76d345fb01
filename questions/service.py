"""
Orchestration of one search: fetch -> parse -> normalize -> recency filter.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from questions.fetcher import FeedFetcher
from questions.models import Question
from questions.normalizer import normalize_entries
from questions.parser import parse_feed
from questions.recency import filter_settled
from questions.settings import FeedSettings

logger = logging.getLogger(__name__)


class QueryService:
    """
    Stateless search entry point. Holding only immutable settings and a
    fetcher without connection state, one instance can serve concurrent
    requests.
    """

    def __init__(self, settings: FeedSettings, fetcher: Optional[FeedFetcher] = None) -> None:
        self.settings = settings
        self.fetcher = fetcher or FeedFetcher.from_settings(settings)
        self.window = timedelta(hours=settings.recency_hours)

    def search(self, term: str = "", *, now: Optional[datetime] = None) -> List[Question]:
        """
        Return settled questions for ``term`` in feed order.

        ``FetchError`` and ``ParseError`` propagate; entries that fail
        normalization are dropped individually.
        """
        payload = self.fetcher.fetch(term)
        return self.process(payload, now=now)

    def process(self, payload: bytes, *, now: Optional[datetime] = None) -> List[Question]:
        now = now or datetime.now(timezone.utc)
        raw_entries = parse_feed(payload)
        questions = normalize_entries(raw_entries)
        settled = filter_settled(questions, now, self.window)
        logger.info(
            "Feed yielded %d entries, %d normalized, %d settled",
            len(raw_entries),
            len(questions),
            len(settled),
        )
        return settled
