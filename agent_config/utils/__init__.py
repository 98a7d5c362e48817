# agent_config/utils/__init__.py
"""Utilities module for agent-config."""

from __future__ import annotations

from agent_config.utils.exceptions import AppError, ConfigValidationError, log_exception, wrap_error

__all__ = [
    "AppError",
    "ConfigValidationError",
    "log_exception",
    "wrap_error",
]
