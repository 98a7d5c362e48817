"""agent-config

Configuration coercion and validation for an AI agent runtime.

This package provides:
- Safe parsing of numeric and boolean values from environment strings
- Typed configuration records for the model, memory and decision subsystems
- Fail-fast validation raising a coded ``ConfigValidationError``
- A small Typer CLI to check a ``.env`` file before starting the agent
"""

from __future__ import annotations

import logging
from typing import Any

__version__ = "0.3.0"
__description__ = "Configuration coercion and validation for AI agent runtimes"

# Configure default logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API exports
__all__ = [
    "__version__",
    "AppConfig",
    "ConfigValidationError",
    "load_config",
    "parse_boolean",
    "parse_number",
    "validate_config",
]


# Lazy imports keep ``import agent_config`` free of pydantic until needed
def __getattr__(name: str) -> Any:
    if name == "AppConfig":
        from agent_config.config.models import AppConfig
        return AppConfig
    elif name == "ConfigValidationError":
        from agent_config.utils.exceptions import ConfigValidationError
        return ConfigValidationError
    elif name == "load_config":
        from agent_config.config.loader import load_config
        return load_config
    elif name in ("parse_boolean", "parse_number"):
        from agent_config.config import parsing
        return getattr(parsing, name)
    elif name == "validate_config":
        from agent_config.config.validation import validate_config
        return validate_config
    else:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

