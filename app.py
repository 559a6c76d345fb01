"""Main application module for the question search service."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask
from flask_cors import CORS

from api_routes import register_routes
from questions.service import QueryService
from questions.settings import FeedSettings, load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("questionsearch")


def configure_logging() -> None:
    """Configure root logging once: stream handler, plus a file when LOG_FILE is set."""
    handlers = [logging.StreamHandler()]
    log_file = os.getenv("LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def create_app(settings: Optional[FeedSettings] = None, service: Optional[QueryService] = None) -> Flask:
    resolved = settings or load_settings()
    app = Flask(__name__)
    app.json.sort_keys = False
    CORS(app)
    register_routes(app, service or QueryService(resolved))
    logger.info("Question search configured against %s", resolved.feed_base_url)
    return app


configure_logging()
app = create_app()

__all__ = ["app", "create_app", "configure_logging"]
