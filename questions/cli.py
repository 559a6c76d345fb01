"""
Command line entry point: run one question search and print JSON lines.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

import click
from dotenv import load_dotenv

from questions.errors import QuestionsError
from questions.recency import only_unedited
from questions.service import QueryService
from questions.settings import load_settings

logger = logging.getLogger(__name__)


@click.command()
@click.argument("term", required=False, default="")
@click.option("--unedited", is_flag=True, help="Only questions never edited after publishing.")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Print at most this many questions.")
@click.option("--config", "config_path", default=None, help="Path to a YAML file with a 'feed' section.")
@click.option("--verbose", is_flag=True, help="Log pipeline progress to stderr.")
def cli(term: str, unedited: bool, limit: Optional[int], config_path: Optional[str], verbose: bool):
    """Search unanswered questions for TERM (empty term allowed)."""
    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    service = QueryService(load_settings(config_path))
    try:
        questions = service.search(term)
    except QuestionsError as exc:
        logger.debug("Search failed", exc_info=True)
        raise click.ClickException(f"Failed to fetch questions: {exc}") from exc

    if unedited:
        questions = only_unedited(questions)
    if limit is not None:
        questions = questions[:limit]
    for question in questions:
        click.echo(json.dumps(question.to_dict(), ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    cli()
