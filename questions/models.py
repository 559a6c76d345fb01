"""
Pydantic models for the feed pipeline.

``RawEntry`` is the decoded shape of one Atom entry and only lives for a single
parse pass. ``Question`` is the canonical record handed to every consumer
(API responses, CLI output, client-side export) and is immutable.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp as the feed writes it.

    Naive values are read as UTC so they can be compared with an aware "now".
    The original string is never rewritten; this only backs comparisons.
    """
    return ensure_aware(datetime.fromisoformat(value.strip()))


def ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class RawEntry(BaseModel):
    id: Optional[str] = None
    title: str = ""
    published: Optional[str] = None
    updated: Optional[str] = None
    link: Optional[str] = None
    content: str = ""
    author_name: Optional[str] = None
    author_uri: Optional[str] = None


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    uri: str = Field(min_length=1)


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str = ""
    published: str
    updated: str
    link: str
    content: str = ""
    author: Optional[Author] = None

    @field_validator("published", "updated")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        parse_timestamp(value)
        return value

    @field_validator("link")
    @classmethod
    def _check_link(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"link is not an absolute URL: {value!r}")
        return value

    @property
    def published_at(self) -> datetime:
        return parse_timestamp(self.published)

    @property
    def updated_at(self) -> datetime:
        return parse_timestamp(self.updated)

    @property
    def is_unedited(self) -> bool:
        return self.published == self.updated

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
