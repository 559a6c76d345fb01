"""
Centralised settings for the question feed pipeline (env-first, code-light).

Values come from ``QUESTIONS_*`` environment variables, then from the ``feed``
section of an optional YAML file, then from the defaults below.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from questions.config_loader import load_feed_config

logger = logging.getLogger(__name__)

DEFAULT_FEED_BASE_URL = "https://in.mathworks.com/matlabcentral/answers/questions"


@dataclass(frozen=True)
class FeedSettings:
    feed_base_url: str = DEFAULT_FEED_BASE_URL
    feed_format: str = "atom"
    feed_sort: str = "relevance"
    feed_status: str = "unanswered"
    timeout_seconds: float = 15.0
    max_retries: int = 1
    recency_hours: float = 48.0
    user_agent: str = "QuestionSearch/1.0"


def _int_value(key: str, raw: Any, default: int) -> int:
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
        return value if value >= 0 else default
    except (TypeError, ValueError):
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default


def _float_value(key: str, raw: Any, default: float) -> float:
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = float(raw)
        return value if value > 0 else default
    except (TypeError, ValueError):
        logger.warning("Invalid float value for %s=%s; using default %s", key, raw, default)
        return default


def _str_value(raw: Any, default: str) -> str:
    if raw is None:
        return default
    token = str(raw).strip()
    return token or default


def load_settings(config_path: Optional[str] = None) -> FeedSettings:
    path = config_path or os.getenv("QUESTIONS_CONFIG_PATH") or "questions.yaml"
    file_cfg: Dict[str, Any] = load_feed_config(Path(path))

    def pick(name: str) -> Tuple[str, Any]:
        """Return (source key, raw value) so bad values are reported where they came from."""
        env_key = f"QUESTIONS_{name.upper()}"
        env_value = os.getenv(env_key)
        if env_value is not None and env_value.strip() != "":
            return env_key, env_value
        return f"{path}:feed.{name}", file_cfg.get(name)

    defaults = FeedSettings()
    return FeedSettings(
        feed_base_url=_str_value(pick("feed_base_url")[1], defaults.feed_base_url),
        feed_format=_str_value(pick("feed_format")[1], defaults.feed_format),
        feed_sort=_str_value(pick("feed_sort")[1], defaults.feed_sort),
        feed_status=_str_value(pick("feed_status")[1], defaults.feed_status),
        timeout_seconds=_float_value(*pick("feed_timeout"), defaults.timeout_seconds),
        max_retries=_int_value(*pick("feed_retries"), defaults.max_retries),
        recency_hours=_float_value(*pick("recency_hours"), defaults.recency_hours),
        user_agent=_str_value(pick("user_agent")[1], defaults.user_agent),
    )
