"""
Configuration management for the application.

Settings come from FWEW_* environment variables (or .env) and are overridden
by config.json when it exists. A missing or broken config.json never stops
the service from starting; the defaults are used instead.
"""
import json
import logging
from pathlib import Path
from typing import Union

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from fwew_api.routes import CURRENT_GENERATION

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"

# config.json keys -> Settings fields
_FILE_KEYS = {
    "Port": "port",
    "WebRoot": "web_root",
    "EngineURL": "engine_url",
    "EngineTimeout": "engine_timeout",
    "APIGeneration": "api_generation",
}


class Settings(BaseSettings):
    """Application settings, immutable once loaded."""

    port: int = 8080
    web_root: str = "https://localhost"
    engine_url: str = "http://localhost:10000"
    engine_timeout: float = 10.0
    api_generation: int = Field(default=CURRENT_GENERATION, ge=1, le=CURRENT_GENERATION)

    model_config = SettingsConfigDict(env_prefix="FWEW_", env_file=".env", extra="ignore", frozen=True)


def load_settings(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Load settings, applying config.json on top of the environment.

    Args:
        path: Location of the JSON config file

    Returns:
        Settings: Loaded settings, or the defaults if the file is unusable
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        overrides = {field: data[key] for key, field in _FILE_KEYS.items() if key in data}
        return Settings(**overrides)
    except FileNotFoundError:
        logger.warning("No config file at %s, using defaults", path)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
    return Settings()
