"""
Tests for agent_config/cli.py
"""

import json
import logging

from typer.testing import CliRunner

from agent_config.cli import app, mask_secret
from agent_config.config.settings import get_settings

runner = CliRunner()


def test_mask_secret():
    assert mask_secret("") == ""
    assert mask_secret("short") == "*****"
    assert mask_secret("sk-1234567890abcd") == "*************abcd"


def test_check_passes_with_env_file(clean_env, tmp_path):
    env_file = tmp_path / "agent.env"
    env_file.write_text("AI_API_KEY=sk-test\nAI_MODEL_NAME=demo-model\n", encoding="utf-8")

    result = runner.invoke(app, ["check", "--env-file", str(env_file)])

    assert result.exit_code == 0, result.output
    assert "Configuration valid" in result.output
    assert "demo-model" in result.output


def test_check_reads_dotenv_from_working_directory(clean_env, tmp_path):
    (tmp_path / ".env").write_text("AI_API_KEY=sk-test\n", encoding="utf-8")

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0, result.output


def test_check_fails_without_api_key(clean_env):
    result = runner.invoke(app, ["check"])

    assert result.exit_code == 1
    assert "CONFIG_VALIDATION_ERROR" in result.output


def test_process_environment_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / "agent.env"
    env_file.write_text("AI_API_KEY=sk-test\nAI_MODEL_NAME=from-file\n", encoding="utf-8")
    clean_env.setenv("AI_MODEL_NAME", "from-process")

    result = runner.invoke(app, ["show", "--json", "--env-file", str(env_file)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["modelConfig"]["model"] == "from-process"


def test_show_json_masks_api_key(clean_env):
    clean_env.setenv("AI_API_KEY", "sk-1234567890abcd")

    result = runner.invoke(app, ["show", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["modelConfig"]["apiKey"] == "*************abcd"
    assert data["memoryConfig"]["maxMemories"] == 1000
    assert data["appConfig"]["name"] == "Kai"
    assert "sk-1234567890abcd" not in result.output


def test_show_table(clean_env):
    clean_env.setenv("AI_API_KEY", "sk-1234567890abcd")

    result = runner.invoke(app, ["show"])

    assert result.exit_code == 0, result.output
    assert "sk-1234567890abcd" not in result.output


def test_lowercase_log_level_in_dotenv_is_accepted(clean_env, tmp_path):
    (tmp_path / ".env").write_text("LOG_LEVEL=debug\nAI_API_KEY=sk-test\n", encoding="utf-8")
    root = logging.getLogger()
    level = root.level
    get_settings.cache_clear()
    try:
        result = runner.invoke(app, ["check"])
    finally:
        get_settings.cache_clear()
        root.setLevel(level)

    assert result.exit_code == 0, result.output
    assert "Configuration valid" in result.output
