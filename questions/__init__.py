"""
Public API for the question search pipeline.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from questions.errors import FetchError, NormalizeError, ParseError, QuestionsError
from questions.models import Author, Question
from questions.service import QueryService
from questions.settings import FeedSettings, load_settings

__all__ = [
    "Author",
    "FeedSettings",
    "FetchError",
    "NormalizeError",
    "ParseError",
    "QueryService",
    "Question",
    "QuestionsError",
    "load_settings",
    "search_questions",
]


def search_questions(
    term: str = "", settings: Optional[FeedSettings] = None, *, now: Optional[datetime] = None
) -> List[Question]:
    """
    Run one search with freshly loaded (or supplied) settings.
    """
    return QueryService(settings or load_settings()).search(term, now=now)
