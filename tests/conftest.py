"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import agent_config' works
without an editable install, and provides shared config fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from agent_config.config.models import AppConfig  # noqa: E402

CONFIG_ENV_VARS = (
    "AI_API_KEY",
    "OPENAI_API_KEY",
    "AI_MODEL_NAME",
    "AI_MAX_TOKENS",
    "AI_TEMPERATURE",
    "AI_BASE_URL",
    "AI_EMBEDDING_MODEL",
    "AI_EMBEDDING_BASE_URL",
    "MEMORY_VECTOR_DIMENSIONS",
    "MEMORY_MAX_SIZE",
    "MEMORY_SIMILARITY_THRESHOLD",
    "MEMORY_SHORT_TERM_CAPACITY",
    "MEMORY_IMPORTANCE_THRESHOLD",
    "DECISION_CONFIDENCE_THRESHOLD",
    "DECISION_MAX_RETRIES",
    "DECISION_MAX_REASONING_STEPS",
    "DECISION_MIN_CONFIDENCE_THRESHOLD",
    "APP_NAME",
    "APP_DEFAULT_LANGUAGE",
    "APP_DATA_PATH",
    "LOG_LEVEL",
    "LOG_LEVEL_PER_MODULE",
    "DEBUG",
)


@pytest.fixture
def valid_config() -> AppConfig:
    """Smallest configuration that passes every check."""
    return AppConfig.model_validate(
        {
            "modelConfig": {
                "apiKey": "k",
                "model": "m",
                "apiBaseUrl": "http://x",
                "maxTokens": 100,
                "temperature": 0.5,
            },
            "memoryConfig": {
                "vectorDimensions": 128,
                "maxMemories": 10,
                "similarityThreshold": 0.5,
                "shortTermCapacity": 5,
            },
            "decisionConfig": {
                "confidenceThreshold": 0.5,
                "maxRetries": 0,
                "maxReasoningSteps": 1,
            },
        }
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip config variables and run from an empty directory.

    Each variable is set then deleted so monkeypatch also removes anything a
    dotenv load adds during the test.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
