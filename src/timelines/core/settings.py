"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

The render-related fields (`show_markers`, `default_date_label`) only provide
*defaults*; the values a user picked are persisted by
:class:`timelines.core.config_store.ConfigStore` at `settings_path`.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `TIMELINES_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    show_markers : bool
        Default for drawing timeline markers; maps from `TIMELINES_SHOW_MARKERS`.
    default_date_label : str
        Default fallback date label; maps from `TIMELINES_DEFAULT_DATE_LABEL`.
    settings_path : Path
        JSON file holding the persisted render configuration; maps from
        `TIMELINES_SETTINGS_PATH`.
    """

    environment: EnvName = Field(default="dev", alias="TIMELINES_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    show_markers: bool = Field(default=True, alias="TIMELINES_SHOW_MARKERS")
    default_date_label: str = Field(default="Date", alias="TIMELINES_DEFAULT_DATE_LABEL")
    settings_path: Path = Field(
        default=Path(".timelines.json"), alias="TIMELINES_SETTINGS_PATH"
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests can force a rebuild via `load_settings.cache_clear()` after
    mutating `os.environ`.
    """
    os.environ.setdefault("TIMELINES_ENV", "dev")
    return Settings()


# Ready-to-use singleton (import-time read of env / .env files).
settings: Settings = load_settings()


def get_logger(name: str = "timelines") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["Settings", "get_logger", "load_settings", "settings"]
