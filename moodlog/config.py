"""Configuration loading for MoodLog.

Settings live in ``~/.config/moodlog/config.toml``. Every key is optional;
anything missing falls back to the defaults on :class:`AppConfig`.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field

from moodlog.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MOODLOG_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "moodlog" / "config.toml"

DEFAULT_TIP = "No tip yet."
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    """Validated application settings."""

    toast_seconds: float = Field(default=2.0, gt=0, description="Toast auto-dismiss delay")
    confetti_seconds: float = Field(default=1.5, gt=0, description="Confetti auto-dismiss delay")
    default_tip: str = Field(default=DEFAULT_TIP, min_length=1, description="Tip for custom moods without one")
    log_level: str = Field(default="WARNING", description="Root log level")

    model_config = {"frozen": True}

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Build from the nested TOML layout."""
        feedback = data.get("feedback", {})
        moods = data.get("moods", {})
        logging_section = data.get("logging", {})

        values = {}
        if "toast_seconds" in feedback:
            values["toast_seconds"] = feedback["toast_seconds"]
        if "confetti_seconds" in feedback:
            values["confetti_seconds"] = feedback["confetti_seconds"]
        if moods.get("default_tip"):
            values["default_tip"] = moods["default_tip"]
        level = str(logging_section.get("level", "WARNING")).upper()
        values["log_level"] = level if level in LOG_LEVELS else "WARNING"
        return cls(**values)


def get_config_path(path: Optional[Path] = None) -> Path:
    """Resolve the config path: explicit argument, then env var, then default."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None, strict: bool = False) -> AppConfig:
    """Load configuration from disk.

    Args:
        path: Config file to read. Defaults to :func:`get_config_path`.
        strict: Raise :class:`ConfigError` instead of falling back to
            defaults when the file cannot be parsed.

    Returns:
        The validated configuration.
    """
    config_path = get_config_path(path)

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return AppConfig()

    try:
        data = toml.load(config_path)
        return AppConfig.from_dict(data)
    except Exception as e:
        if strict:
            raise ConfigError(f"Could not read {config_path}: {e}") from e
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return AppConfig()


def create_template_config(path: Optional[Path] = None, force: bool = False) -> Path:
    """Write a template configuration file.

    Args:
        path: Where to write. Defaults to :func:`get_config_path`.
        force: Overwrite an existing file.

    Returns:
        Path of the written file.
    """
    config_path = get_config_path(path)
    if config_path.exists() and not force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")

    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "feedback": {
            "toast_seconds": 2.0,
            "confetti_seconds": 1.5,
        },
        "moods": {
            "default_tip": DEFAULT_TIP,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
