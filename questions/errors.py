"""
Error taxonomy for the question feed pipeline.
"""
from __future__ import annotations

from typing import Optional


class QuestionsError(Exception):
    """Base class for every failure raised by the pipeline."""


class FetchError(QuestionsError):
    """
    The upstream feed could not be retrieved (transport failure, timeout or
    non-success status). Fatal for the request.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(QuestionsError):
    """The payload is not a well-formed Atom document. Fatal for the request."""


class NormalizeError(QuestionsError):
    """
    A single entry lacks a required field. Recoverable: the entry is skipped
    and the rest of the feed is still returned.
    """

    def __init__(self, message: str, entry_id: Optional[str] = None):
        super().__init__(message)
        self.entry_id = entry_id
