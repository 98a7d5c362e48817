# agent_config/utils/exceptions.py
"""Exception hierarchy for agent-config.

Every error raised by this package derives from :class:`AppError`, which
carries a stable machine-readable ``code`` alongside the human-readable
message. Errors serialise to a flat JSON payload so the CLI and any
structured log sink can report them uniformly.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
from typing import Any, Dict, Optional

__all__ = [
    "AppError",
    "ConfigValidationError",
    "wrap_error",
    "log_exception",
]

log = logging.getLogger(__name__)


# =============================================================================
# Base Exception Class
# =============================================================================

class AppError(RuntimeError):
    """Base exception class for all agent-config errors.

    Attributes:
        message: Human-readable error description
        context: Additional context information as key-value pairs
        code: Error code for programmatic handling
        ts_utc: UTC timestamp when the error occurred

    Example:
        try:
            risky_operation()
        except Exception as e:
            raise AppError(
                "Operation failed",
                context={"operation": "risky_operation"},
                cause=e,
            )
    """

    default_code: str = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.code = self.default_code
        self.ts_utc = dt.datetime.now(dt.timezone.utc)

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a JSON-serializable dictionary.

        Returns:
            Dictionary with the error code, message, ISO timestamp and, when
            present, the context and a summary of the underlying cause.
        """
        payload: Dict[str, Any] = {
            "error": self.code,
            "message": self.message,
            "timestamp": self.ts_utc.isoformat(),
        }

        if self.context:
            payload["context"] = self.context

        if self.__cause__ is not None:
            payload["cause"] = {
                "type": type(self.__cause__).__name__,
                "message": str(self.__cause__),
            }

        return payload

    def __str__(self) -> str:
        """Return compact JSON representation of the exception."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"), default=str)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigValidationError(AppError):
    """Raised when an assembled configuration violates a field constraint.

    Validation is fail-fast, so one instance always describes exactly one
    offending field. The field name is kept in ``context["field"]``.

    Example:
        if config.max_tokens <= 0:
            raise ConfigValidationError(
                "max_tokens must be greater than 0",
                field="model.max_tokens",
                context={"value": config.max_tokens},
            )
    """

    default_code = "CONFIG_VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = dict(context or {})
        if field is not None:
            context["field"] = field
        super().__init__(message, context=context)

    @property
    def field(self) -> Optional[str]:
        return self.context.get("field")


# =============================================================================
# Helper Functions
# =============================================================================

def wrap_error(error: BaseException, default_message: str = "An unknown error occurred") -> AppError:
    """Return *error* as an :class:`AppError`.

    Application errors pass through untouched; anything else is wrapped
    with its original message (or *default_message* when it has none) and
    chained as the cause.
    """
    if isinstance(error, AppError):
        return error

    message = str(error).strip() or default_message
    return AppError(message, cause=error)


def log_exception(
    exception: AppError,
    *,
    level: int = logging.ERROR,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log an :class:`AppError` as a structured JSON payload."""
    if logger is None:
        logger = log

    logger.log(level, "%s", json.dumps(exception.to_dict(), ensure_ascii=False, default=str))
