"""agent_config.config.settings
============================
Process-level runtime settings for **agent-config**.

These are the knobs of the tool itself (debug flag, log levels), not the
agent configuration validated by :mod:`agent_config.config.validation`.
They are read by `pydantic-settings` from environment variables and an
optional ``.env`` file in the working directory.

The module also exposes helpers:

* `get_settings()` – cached accessor for DI/tests.
* `configure_logging()` – sets up logging from ``logging.yaml`` and
  honours `LOG_LEVEL_PER_MODULE` for fine-grained control.

Usage
-----
```python
from agent_config.config.settings import get_settings, configure_logging

settings = get_settings()
configure_logging(settings)
```
"""
from __future__ import annotations

import logging
import logging.config
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, Literal, Optional

import yaml
from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["RuntimeSettings", "get_settings", "configure_logging", "LOGGING_CONFIG_FILE"]

LOGGING_CONFIG_FILE = "logging.yaml"


def _normalise_level(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().upper()
    return value


_log_level_type = Annotated[
    Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"],
    BeforeValidator(_normalise_level),
]


class RuntimeSettings(BaseSettings):
    """Runtime settings (validated & type-safe)."""

    debug: bool = Field(False, description="Enable debug output")

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: _log_level_type = Field("INFO", description="Root log level")
    log_level_per_module: Optional[Dict[str, _log_level_type]] = Field(
        default=None,
        description="Per-module log levels, e.g. '{\"agent_config.config\": \"DEBUG\"}'.",
    )
    logging_config_path: Path = Field(
        Path(LOGGING_CONFIG_FILE), description="dictConfig YAML file applied when present"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return a cached `RuntimeSettings` instance (singleton-like)."""
    return RuntimeSettings()


def configure_logging(settings: RuntimeSettings | None = None) -> None:
    """Configure logging from ``logging.yaml`` and apply overrides.

    If the YAML file is missing, falls back to ``basicConfig``. Call this
    once at startup (the CLI does it before running a command).
    """
    settings = settings or get_settings()
    cfg_path = settings.logging_config_path
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as fp:
            config_dict = yaml.safe_load(fp) or {}
        logging.config.dictConfig(config_dict)
    else:
        logging.basicConfig(level=settings.log_level)

    if settings.debug:
        logging.getLogger("agent_config").setLevel(logging.DEBUG)

    # fine-grained overrides
    if settings.log_level_per_module:
        for mod, lvl in settings.log_level_per_module.items():
            logging.getLogger(mod).setLevel(lvl)
