# Area: Shared
"""
bowling_scorer._config — Configuration loading
==============================================

Loads configuration from an optional JSON file, a .env file and the
process environment (in increasing order of precedence).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("bowling_scorer")

DEFAULTS: Dict[str, Any] = {
    "db_path": "bowling.db",
    "log_file": "bowling_scorer.log",
    "log_level": "INFO",
}

ENV_MAPPINGS = {
    "BOWLING_DB_PATH": "db_path",
    "BOWLING_LOG_FILE": "log_file",
    "BOWLING_LOG_LEVEL": "log_level",
}

REQUIRED_CONFIG_KEYS = ["db_path", "log_file", "log_level"]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from defaults, file and environment.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        Configuration dict with every key in DEFAULTS
    """
    config: Dict[str, Any] = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {config_path}")

    load_dotenv(find_dotenv(usecwd=True))
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    config["log_level"] = str(config["log_level"]).upper()
    return config


def validate_config(config: dict) -> None:
    """
    Validate required configuration keys.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If required keys are missing or the log level is unknown
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    if config["log_level"] not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {config['log_level']}")


def log_level(config: dict) -> int:
    """Translate the configured level name into a logging constant."""
    return getattr(logging, config["log_level"])
