"""
Configuration loading for WikiRetriever.

Settings live in a ``config.json`` file next to this module. Values found in the
file are merged over the built-in defaults, so a partial file is enough.
"""
import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "crawler": {
        "base_url": "https://en.wikipedia.org/wiki",
        "request_delay_seconds": 1.0,
        "timeout_seconds": 10.0,
        "user_agent": "WikiRetriever/0.1 (educational search engine)",
    },
    "search": {
        "top_k": 10,
    },
    "topics": [
        "Information_retrieval",
        "Machine_learning",
        "Natural_language_processing",
        "Data_mining",
        "Search_engine",
    ],
    "demo_queries": {
        "boolean": ["information AND retrieval", "learning OR processing"],
        "ranked": ["information retrieval", "learning processing"],
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, falling back to defaults.

    Args:
        config_path: Explicit path to a JSON config file. When given, the file
            must exist and be valid JSON, otherwise ConfigError is raised.
            When omitted, the bundled config.json is used if it can be read.

    Returns:
        Configuration dictionary with every default key present
    """
    if config_path is not None:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not load config file {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")
        return _merge(DEFAULT_CONFIG, data)

    if os.path.exists(DEFAULT_CONFIG_PATH):
        try:
            with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return _merge(DEFAULT_CONFIG, data)
            logger.warning("Ignoring %s: expected a JSON object", DEFAULT_CONFIG_PATH)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load config: %s, using default settings", e)
    else:
        logger.debug("No config.json found, using default settings")

    return copy.deepcopy(DEFAULT_CONFIG)
