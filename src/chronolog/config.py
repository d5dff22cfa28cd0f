"""Configuration management for Chronolog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CHRONOLOG_HOME = Path(os.environ.get("CHRONOLOG_HOME", Path.home() / "chronolog"))
CONFIG_FILE = CHRONOLOG_HOME / "config" / "chronolog.conf"
DATA_DIR = CHRONOLOG_HOME / "data"

STORAGE_KEY = "chronolog_data_v1"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Checked in order when the config file has no key
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


@dataclass
class Config:
    """Chronolog configuration."""

    data_dir: str = ""
    storage_key: str = STORAGE_KEY
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_timeout: int = 60


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]

    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from chronolog.conf, falling back to the environment."""
    config = Config()

    if CONFIG_FILE.exists():
        for line in CONFIG_FILE.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "data_dir":
                    config.data_dir = value
                case "storage_key":
                    if value:
                        config.storage_key = value
                case "gemini_api_key" | "api_key":
                    config.gemini_api_key = value
                case "gemini_model":
                    if value:
                        config.gemini_model = value
                case "gemini_timeout":
                    try:
                        config.gemini_timeout = int(value)
                    except ValueError:
                        logger.warning(f"Invalid GEMINI_TIMEOUT {value!r}, using {config.gemini_timeout}s")

    if not config.gemini_api_key:
        for var in API_KEY_ENV_VARS:
            if os.environ.get(var):
                config.gemini_api_key = os.environ[var]
                break

    return config
