"""
Decode an Atom payload into ``RawEntry`` records.

feedparser is lenient by design; this module is the single place where a
payload that is not well-formed Atom is rejected with ``ParseError`` instead of
leaking half-populated entries downstream.
"""
from __future__ import annotations

import io
import logging
from typing import Any, List, Mapping, Optional, Union

import feedparser

from questions.errors import ParseError
from questions.models import RawEntry

logger = logging.getLogger(__name__)

# Bozo conditions that still leave a trustworthy document behind.
_TOLERATED_BOZO = (feedparser.CharacterEncodingOverride,)


def parse_feed(payload: Union[bytes, str]) -> List[RawEntry]:
    """
    Return the feed's entries in document order. An empty feed yields ``[]``.
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    # A stream keeps feedparser from treating the payload as a path or URL.
    parsed = feedparser.parse(io.BytesIO(payload), sanitize_html=False, resolve_relative_uris=False)

    if parsed.get("bozo"):
        exc = parsed.get("bozo_exception")
        if not isinstance(exc, _TOLERATED_BOZO):
            raise ParseError(f"Feed payload is not well-formed: {exc}")

    version = parsed.get("version") or ""
    if not version.startswith("atom"):
        raise ParseError(f"Expected an Atom feed, got {version or 'unknown format'!r}")

    entries = [_decode_entry(entry) for entry in parsed.get("entries", [])]
    logger.debug("Parsed %d entries from %s feed", len(entries), version)
    return entries


def _decode_entry(entry: Mapping[str, Any]) -> RawEntry:
    author = _field(entry, "author_detail") or {}
    return RawEntry(
        id=_text(_field(entry, "id")),
        title=_text(_field(entry, "title")) or "",
        published=_text(_field(entry, "published")),
        updated=_text(_field(entry, "updated")),
        link=_first_link(entry),
        content=_content(entry),
        author_name=_text(_field(author, "name")),
        author_uri=_text(_field(author, "href")),
    )


def _field(entry: Mapping[str, Any], key: str) -> Any:
    # FeedParserDict.get resolves aliases ("updated" falls back to
    # "published", "link" can come from "id"); only keys the document set count.
    return dict.get(entry, key)


def _first_link(entry: Mapping[str, Any]) -> Optional[str]:
    for link in _field(entry, "links") or []:
        href = _text(_field(link, "href"))
        if href:
            return href
    return None


def _content(entry: Mapping[str, Any]) -> str:
    for block in _field(entry, "content") or []:
        value = _field(block, "value")
        if value is not None:
            return str(value)
    return _text(_field(entry, "summary")) or ""


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
