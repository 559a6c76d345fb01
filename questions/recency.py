"""
Recency cutoff: questions published within the window are not settled yet.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, List, Union

from questions.models import Question, ensure_aware, parse_timestamp

DEFAULT_WINDOW = timedelta(hours=48)


def is_settled(published: Union[str, datetime], now: datetime, window: timedelta = DEFAULT_WINDOW) -> bool:
    """
    True when more than ``window`` has elapsed since ``published``.

    The interval is closed: an entry exactly ``window`` old is still excluded.
    Naive datetimes (``now`` included) are read as UTC; string timestamps must
    already be valid.
    """
    published_at = parse_timestamp(published) if isinstance(published, str) else ensure_aware(published)
    return ensure_aware(now) - published_at > window


def filter_settled(
    questions: Iterable[Question], now: datetime, window: timedelta = DEFAULT_WINDOW
) -> List[Question]:
    return [question for question in questions if is_settled(question.published_at, now, window)]


def only_unedited(questions: Iterable[Question]) -> List[Question]:
    """Keep questions whose ``updated`` equals ``published``, in order."""
    return [question for question in questions if question.is_unedited]
