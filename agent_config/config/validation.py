"""Fail-fast range checks for an assembled :class:`AppConfig`.

Sections are checked in a fixed order (model, memory, decision, then the
optional app section) and the first violation raises
:class:`ConfigValidationError`. A config that passes is returned as the
same object, so callers can keep using the reference they passed in.
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import SecretStr

from agent_config.config.models import AppConfig, AppInfo, DecisionConfig, MemoryConfig, ModelConfig
from agent_config.utils.exceptions import ConfigValidationError

__all__ = [
    "validate_config",
    "validate_model_config",
    "validate_memory_config",
    "validate_decision_config",
    "validate_app_info",
]

log = logging.getLogger(__name__)


def _secret(value: Any) -> Any:
    if isinstance(value, SecretStr):
        return value.get_secret_value()
    return value


def _fail(field: str, message: str, value: Any = None) -> ConfigValidationError:
    context = {} if value is None else {"value": value}
    return ConfigValidationError(message, field=field, context=context)


def validate_model_config(config: ModelConfig) -> None:
    if not _secret(config.api_key):
        raise _fail("model.api_key", "API key must not be empty; set AI_API_KEY")
    if not config.model:
        raise _fail("model.model", "Model name must not be empty")
    if not config.api_base_url:
        raise _fail("model.api_base_url", "API base URL must not be empty")
    if config.max_tokens <= 0:
        raise _fail("model.max_tokens", "max_tokens must be greater than 0", config.max_tokens)
    if config.temperature < 0 or config.temperature > 2:
        raise _fail("model.temperature", "temperature must be between 0 and 2", config.temperature)


def validate_memory_config(config: MemoryConfig) -> None:
    if config.vector_dimensions <= 0:
        raise _fail(
            "memory.vector_dimensions",
            "vector_dimensions must be greater than 0",
            config.vector_dimensions,
        )
    if config.max_memories <= 0:
        raise _fail("memory.max_memories", "max_memories must be greater than 0", config.max_memories)
    if config.similarity_threshold < 0 or config.similarity_threshold > 1:
        raise _fail(
            "memory.similarity_threshold",
            "similarity_threshold must be between 0 and 1",
            config.similarity_threshold,
        )
    if config.short_term_capacity <= 0:
        raise _fail(
            "memory.short_term_capacity",
            "short_term_capacity must be greater than 0",
            config.short_term_capacity,
        )


def validate_decision_config(config: DecisionConfig) -> None:
    if config.confidence_threshold < 0 or config.confidence_threshold > 1:
        raise _fail(
            "decision.confidence_threshold",
            "confidence_threshold must be between 0 and 1",
            config.confidence_threshold,
        )
    if config.max_retries < 0:
        raise _fail("decision.max_retries", "max_retries must not be negative", config.max_retries)
    if config.max_reasoning_steps <= 0:
        raise _fail(
            "decision.max_reasoning_steps",
            "max_reasoning_steps must be greater than 0",
            config.max_reasoning_steps,
        )


def validate_app_info(config: AppInfo) -> None:
    if not config.name:
        raise _fail("app.name", "Application name must not be empty")
    if not config.version:
        raise _fail("app.version", "Application version must not be empty")
    if not config.default_language:
        raise _fail("app.default_language", "Default language must not be empty")


def validate_config(config: AppConfig) -> AppConfig:
    """Validate every section of *config* and return it unchanged.

    Raises:
        ConfigValidationError: on the first field that violates its range,
            checked in model, memory, decision, app order.
    """
    validate_model_config(config.model)
    validate_memory_config(config.memory)
    validate_decision_config(config.decision)
    if config.app is not None:
        validate_app_info(config.app)

    log.debug("Configuration validated (model=%s)", config.model.model)
    return config
