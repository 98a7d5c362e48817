"""
Tests for agent_config/utils/exceptions.py
"""

import json
import logging

from agent_config.utils.exceptions import AppError, ConfigValidationError, log_exception, wrap_error


def test_error_hierarchy():
    assert issubclass(ConfigValidationError, AppError)
    assert issubclass(AppError, RuntimeError)


def test_codes():
    assert AppError("boom").code == "UNKNOWN_ERROR"
    assert ConfigValidationError("bad").code == "CONFIG_VALIDATION_ERROR"


def test_config_validation_error_carries_field():
    err = ConfigValidationError("max_tokens must be greater than 0", field="model.max_tokens", context={"value": 0})
    assert err.field == "model.max_tokens"
    assert err.context == {"value": 0, "field": "model.max_tokens"}
    assert err.message == "max_tokens must be greater than 0"


def test_to_dict_and_str_are_json():
    err = ConfigValidationError("bad", field="memory.max_memories")
    payload = err.to_dict()
    assert payload["error"] == "CONFIG_VALIDATION_ERROR"
    assert payload["message"] == "bad"
    assert payload["context"]["field"] == "memory.max_memories"
    assert json.loads(str(err))["error"] == "CONFIG_VALIDATION_ERROR"


def test_wrap_error_passes_app_errors_through():
    err = ConfigValidationError("bad")
    assert wrap_error(err) is err


def test_wrap_error_wraps_foreign_exceptions():
    cause = ValueError("not a number")
    wrapped = wrap_error(cause)
    assert type(wrapped) is AppError
    assert wrapped.message == "not a number"
    assert wrapped.__cause__ is cause
    assert wrapped.to_dict()["cause"]["type"] == "ValueError"


def test_wrap_error_uses_default_message_for_empty_errors():
    wrapped = wrap_error(KeyError(), "lookup failed")
    assert wrapped.message == "lookup failed"


def test_log_exception_emits_structured_payload(caplog):
    err = ConfigValidationError("bad", field="decision.max_retries")
    logger = logging.getLogger("agent_config.tests")
    with caplog.at_level(logging.WARNING, logger="agent_config.tests"):
        log_exception(err, level=logging.WARNING, logger=logger)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert json.loads(record.getMessage())["context"]["field"] == "decision.max_retries"
