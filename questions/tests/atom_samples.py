"""Atom payload builders shared by the test modules."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

NOW = datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)


def iso_ago(delta: timedelta, now: datetime = NOW) -> str:
    return (now - delta).strftime("%Y-%m-%dT%H:%M:%SZ")


def atom_entry(
    question_id: Optional[str] = "1001",
    title: str = "How do I vectorize this loop?",
    published: Optional[str] = None,
    updated: Optional[str] = None,
    link: Optional[str] = "default",
    content: str = "&lt;p&gt;My loop is slow.&lt;/p&gt;",
    author: Optional[Tuple[Optional[str], Optional[str]]] = ("Ana Lopez", "https://in.mathworks.com/matlabcentral/profile/authors/42"),
    raw_id: Optional[str] = None,
    omit_updated: bool = False,
) -> str:
    published = published or iso_ago(timedelta(hours=72))
    updated = updated or published
    parts = []
    if raw_id is not None:
        parts.append(f"<id>{raw_id}</id>")
    elif question_id is not None:
        parts.append(f"<id>tag:in.mathworks.com,2005:Question/{question_id}</id>")
    parts.append(f"<title>{title}</title>")
    parts.append(f"<published>{published}</published>")
    if not omit_updated:
        parts.append(f"<updated>{updated}</updated>")
    if link == "default":
        link = f"https://in.mathworks.com/matlabcentral/answers/{question_id}-question"
    if link is not None:
        parts.append(f'<link rel="alternate" type="text/html" href="{link}"/>')
    parts.append(f'<content type="html">{content}</content>')
    if author is not None:
        name, uri = author
        block = ["<author>"]
        if name is not None:
            block.append(f"<name>{name}</name>")
        if uri is not None:
            block.append(f"<uri>{uri}</uri>")
        block.append("</author>")
        parts.append("".join(block))
    return "<entry>" + "".join(parts) + "</entry>"


def atom_feed(*entries: str) -> bytes:
    body = "".join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<feed xmlns="http://www.w3.org/2005/Atom">'
        "<title>MATLAB Answers</title>"
        "<id>tag:in.mathworks.com,2005:/matlabcentral/answers/questions</id>"
        "<updated>2024-06-10T12:00:00Z</updated>"
        f"{body}"
        "</feed>"
    ).encode("utf-8")


EMPTY_FEED = atom_feed()

RSS_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Not Atom</title>
    <item><title>Item</title><link>https://example.com/a</link></item>
  </channel>
</rss>
"""

MALFORMED_FEED = b"<feed xmlns='http://www.w3.org/2005/Atom'><entry><title>broken</entry>"
