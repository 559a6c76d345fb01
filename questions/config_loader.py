"""
Load the optional ``questions.yaml`` file.

Only the ``feed`` section is read. String values written as ``${NAME}`` are
replaced by the environment variable ``NAME`` (empty when unset), so secrets
and per-deployment URLs can stay out of the file.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


def load_feed_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Return the ``feed`` section of the YAML file, or ``{}`` when absent."""
    path = Path(config_path)
    if not path.exists():
        logger.debug("No feed config file at %s; using env/defaults.", path)
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level must be a mapping.", path)
        return {}
    section = data.get("feed") or {}
    if not isinstance(section, dict):
        logger.warning("Ignoring 'feed' section in %s: expected a mapping.", path)
        return {}
    return {key: _resolve_placeholder(value) for key, value in section.items()}


def _resolve_placeholder(value: Any) -> Any:
    # Feed settings are flat scalars; nested values are passed through as-is.
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        return os.getenv(value[2:-1], "")
    return value
