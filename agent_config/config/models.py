# models.py - configuration records for the agent runtime
"""Typed configuration sections consumed by the model, memory and decision
subsystems.

These models carry no range constraints, only shape. Range checks live in
:mod:`agent_config.config.validation` so a caller can build a record from
raw values first and have every violation reported as a
:class:`~agent_config.utils.exceptions.ConfigValidationError`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic.alias_generators import to_camel

__all__ = [
    "ModelConfig",
    "MemoryConfig",
    "DecisionConfig",
    "AppInfo",
    "AppConfig",
]

# camelCase keys (``apiKey``) and field names (``api_key``) are both accepted
_SECTION_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    protected_namespaces=(),
)


# ---------------------------------------------------------------------------
# Subsystem sections
# ---------------------------------------------------------------------------
class ModelConfig(BaseModel):
    """Language model endpoint and sampling parameters."""

    model_config = _SECTION_CONFIG

    api_key: SecretStr = Field(SecretStr(""), description="Provider API key")
    model: str = Field("", description="Model identifier sent to the provider")
    api_base_url: str = Field("", description="Provider base URL")
    max_tokens: int = Field(2000, description="Completion token limit")
    temperature: float = Field(0.7, description="Sampling temperature")

    model_name: Optional[str] = Field(None, description="Display name of the model")
    embedding_model: Optional[str] = None
    embedding_base_url: Optional[str] = None


class MemoryConfig(BaseModel):
    """Vector memory sizing and recall thresholds."""

    model_config = _SECTION_CONFIG

    vector_dimensions: int = Field(1024, description="Embedding vector size")
    max_memories: int = Field(1000, description="Long-term memory capacity")
    similarity_threshold: float = Field(0.6, description="Minimum recall similarity")
    short_term_capacity: int = Field(10, description="Short-term buffer size")
    importance_threshold: float = 0.5


class DecisionConfig(BaseModel):
    """Reasoning loop limits."""

    model_config = _SECTION_CONFIG

    confidence_threshold: float = Field(0.7, description="Confidence needed to act")
    max_retries: int = Field(3, description="Retries after a failed step")
    max_reasoning_steps: int = Field(5, description="Upper bound on reasoning steps")
    min_confidence_threshold: float = 0.6


class AppInfo(BaseModel):
    """Identity of the running assistant."""

    model_config = _SECTION_CONFIG

    name: str = ""
    version: str = ""
    default_language: str = ""
    data_path: Optional[str] = None


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
class AppConfig(BaseModel):
    """Complete configuration handed to the validator and then the runtime."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model: ModelConfig = Field(default_factory=ModelConfig, alias="modelConfig")
    memory: MemoryConfig = Field(default_factory=MemoryConfig, alias="memoryConfig")
    decision: DecisionConfig = Field(default_factory=DecisionConfig, alias="decisionConfig")
    app: Optional[AppInfo] = Field(None, alias="appConfig")
