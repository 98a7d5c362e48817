"""agent_config.config.loader
===========================
Build an :class:`AppConfig` from environment-style string variables.

Every numeric variable goes through :func:`parse_number` with its own
bounds, so an out-of-range value is clamped and a malformed one falls
back to its default. Only a string mapping is read (``os.environ`` unless
another mapping is supplied); dotenv files are loaded by the caller.

Usage
-----
```python
from agent_config.config.loader import load_validated_config

config = load_validated_config()
```
"""
from __future__ import annotations

import logging
import math
import os
from typing import Mapping, Optional

from agent_config import __version__
from agent_config.config.models import AppConfig, AppInfo, DecisionConfig, MemoryConfig, ModelConfig
from agent_config.config.parsing import parse_number
from agent_config.config.validation import validate_config

__all__ = ["load_config", "load_validated_config", "DEFAULT_BASE_URL", "DEFAULT_MODEL"]

log = logging.getLogger(__name__)

DEFAULT_MODEL = "qwen-max-latest"
DEFAULT_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
DEFAULT_EMBEDDING_MODEL = "text-embedding-v3"
DEFAULT_APP_NAME = "Kai"
DEFAULT_LANGUAGE = "zh-CN"


def _parse_count(raw: Optional[str], default: int, **bounds: int) -> int:
    """Integer variant of :func:`parse_number`; fractions are truncated."""
    value = parse_number(raw, default, **bounds)
    if not math.isfinite(value):
        return default
    return int(value)


def _load_model(env: Mapping[str, str]) -> ModelConfig:
    model = env.get("AI_MODEL_NAME") or DEFAULT_MODEL
    base_url = env.get("AI_BASE_URL") or DEFAULT_BASE_URL
    return ModelConfig(
        api_key=env.get("AI_API_KEY") or env.get("OPENAI_API_KEY", ""),
        model=model,
        model_name=model,
        api_base_url=base_url,
        max_tokens=_parse_count(env.get("AI_MAX_TOKENS"), 2000, min=100, max=100_000),
        temperature=parse_number(env.get("AI_TEMPERATURE"), 0.7, min=0, max=2),
        embedding_model=env.get("AI_EMBEDDING_MODEL") or DEFAULT_EMBEDDING_MODEL,
        embedding_base_url=env.get("AI_EMBEDDING_BASE_URL") or base_url,
    )


def _load_memory(env: Mapping[str, str]) -> MemoryConfig:
    return MemoryConfig(
        vector_dimensions=_parse_count(env.get("MEMORY_VECTOR_DIMENSIONS"), 1024, min=1),
        max_memories=_parse_count(env.get("MEMORY_MAX_SIZE"), 1000, min=10),
        similarity_threshold=parse_number(env.get("MEMORY_SIMILARITY_THRESHOLD"), 0.6, min=0, max=1),
        short_term_capacity=_parse_count(env.get("MEMORY_SHORT_TERM_CAPACITY"), 10, min=1),
        importance_threshold=parse_number(env.get("MEMORY_IMPORTANCE_THRESHOLD"), 0.5, min=0, max=1),
    )


def _load_decision(env: Mapping[str, str]) -> DecisionConfig:
    return DecisionConfig(
        confidence_threshold=parse_number(env.get("DECISION_CONFIDENCE_THRESHOLD"), 0.7, min=0, max=1),
        max_retries=_parse_count(env.get("DECISION_MAX_RETRIES"), 3, min=0),
        max_reasoning_steps=_parse_count(env.get("DECISION_MAX_REASONING_STEPS"), 5, min=1),
        min_confidence_threshold=parse_number(
            env.get("DECISION_MIN_CONFIDENCE_THRESHOLD"), 0.6, min=0, max=1
        ),
    )


def _load_app(env: Mapping[str, str]) -> AppInfo:
    return AppInfo(
        name=env.get("APP_NAME") or DEFAULT_APP_NAME,
        version=__version__,
        default_language=env.get("APP_DEFAULT_LANGUAGE") or DEFAULT_LANGUAGE,
        data_path=env.get("APP_DATA_PATH") or None,
    )


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Assemble an unvalidated :class:`AppConfig` from *environ*."""
    env = os.environ if environ is None else environ
    config = AppConfig(
        model=_load_model(env),
        memory=_load_memory(env),
        decision=_load_decision(env),
        app=_load_app(env),
    )
    log.debug("Loaded configuration for model %s from environment", config.model.model)
    return config


def load_validated_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Assemble a config from *environ* and run :func:`validate_config` on it."""
    return validate_config(load_config(environ))
