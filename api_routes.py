"""API routes for the question search service."""
from __future__ import annotations

import logging

from flask import jsonify, request

from questions.errors import QuestionsError
from questions.recency import only_unedited
from questions.service import QueryService

logger = logging.getLogger("questionsearch")

FAILURE_MESSAGE = "Failed to fetch questions"
_TRUTHY = {"1", "true", "yes", "on"}


def register_routes(app, service: QueryService):
    """Register all API routes with the Flask app.

    Args:
        app: Flask app instance.
        service: QueryService shared by every request (it keeps no state).
    """

    @app.route("/api/questions")
    def api_questions():
        """Search the upstream feed and return settled questions."""
        term = request.args.get("term", "")
        unedited = request.args.get("unedited", "").strip().lower() in _TRUTHY
        logger.info("Received question search for term %r", term)
        try:
            questions = service.search(term)
        except QuestionsError as exc:
            logger.error("Question search failed for term %r: %s", term, exc, exc_info=True)
            return jsonify({"success": False, "error": FAILURE_MESSAGE}), 500
        except Exception as exc:  # pragma: no cover - last-resort boundary
            logger.error("Unexpected error searching for %r: %s", term, exc, exc_info=True)
            return jsonify({"success": False, "error": FAILURE_MESSAGE}), 500

        if unedited:
            questions = only_unedited(questions)
        logger.info("Returning %d questions for term %r", len(questions), term)
        return jsonify({"success": True, "data": [question.to_dict() for question in questions]})
