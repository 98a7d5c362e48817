"""Configuration module for agent-config.

Coercion helpers, configuration records, the validator and the
environment loader.
"""

from __future__ import annotations

from agent_config.config.loader import load_config, load_validated_config
from agent_config.config.models import AppConfig, AppInfo, DecisionConfig, MemoryConfig, ModelConfig
from agent_config.config.parsing import parse_boolean, parse_number
from agent_config.config.validation import validate_config

__all__ = [
    "AppConfig",
    "AppInfo",
    "DecisionConfig",
    "MemoryConfig",
    "ModelConfig",
    "load_config",
    "load_validated_config",
    "parse_boolean",
    "parse_number",
    "validate_config",
]
