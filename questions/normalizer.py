"""
Map decoded feed entries to canonical ``Question`` records.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from pydantic import ValidationError

from questions.errors import NormalizeError
from questions.models import Author, Question, RawEntry

logger = logging.getLogger(__name__)

# Atom ids look like "tag:host,2005:Question/12345" or a plain URL; the
# question id is whatever follows the last ':' or '/'.
_ID_SEPARATORS = re.compile(r"[:/]")


def extract_id(raw_id: Optional[str]) -> str:
    if not raw_id:
        raise NormalizeError("entry has no identifier")
    segment = _ID_SEPARATORS.split(raw_id.strip())[-1]
    if not segment:
        raise NormalizeError(f"identifier {raw_id!r} has an empty final segment", entry_id=raw_id)
    return segment


def extract_author(raw: RawEntry) -> Optional[Author]:
    if not raw.author_name or not raw.author_uri:
        return None
    return Author(name=raw.author_name, uri=raw.author_uri)


def normalize_entry(raw: RawEntry) -> Question:
    """
    Build a ``Question`` from one entry.

    Raises ``NormalizeError`` when the identifier or link is missing or a
    timestamp does not parse. Timestamps are kept exactly as the feed wrote
    them.
    """
    question_id = extract_id(raw.id)
    if not raw.link:
        raise NormalizeError("entry has no link", entry_id=question_id)
    if raw.published is None or raw.updated is None:
        raise NormalizeError("entry is missing a published or updated timestamp", entry_id=question_id)
    try:
        return Question(
            id=question_id,
            title=raw.title,
            published=raw.published,
            updated=raw.updated,
            link=raw.link,
            content=raw.content,
            author=extract_author(raw),
        )
    except ValidationError as exc:
        raise NormalizeError(f"entry failed validation: {exc}", entry_id=question_id) from exc


def normalize_entries(raws: Iterable[RawEntry]) -> List[Question]:
    """Normalize in order, skipping (and logging) entries that cannot be normalized."""
    questions: List[Question] = []
    for raw in raws:
        try:
            questions.append(normalize_entry(raw))
        except NormalizeError as exc:
            logger.warning("Skipping feed entry %s: %s", exc.entry_id or "<no id>", exc)
    return questions
