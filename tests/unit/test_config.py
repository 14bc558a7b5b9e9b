"""
Tests unitarios para la carga de configuracion.
"""
from __future__ import annotations

import pytest

from fraud_sync.core.config import REQUIRED_ENV_VARS, load_settings
from fraud_sync.shared.exceptions.sync import ConfigurationError


@pytest.fixture
def env(monkeypatch, settings_values):
    for name in REQUIRED_ENV_VARS + ("DEBUG", "SKIP_CASES_WITHOUT_COUNTRY", "REQUEST_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)
    for name, value in settings_values.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


def test_loads_required_vars_and_defaults(env):
    settings = load_settings(_env_file=None)

    assert settings.RMQ_QUEUE_NAME == "fraud-cases-sync"
    assert settings.CATENAX_API_KEY == "catenax-key"
    assert settings.REQUEST_TIMEOUT_S == 30
    assert settings.FRAUD_CASES_PAGE_SIZE == 200
    assert settings.FRAUD_CASES_CLASSIFICATION == "CATENAX"
    assert settings.SKIP_CASES_WITHOUT_COUNTRY is False
    assert settings.DEBUG is False


@pytest.mark.parametrize("missing", REQUIRED_ENV_VARS)
def test_missing_required_var_fails(env, missing):
    env.delenv(missing)

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(_env_file=None)

    assert exc_info.value.missing == [missing]
    assert f"${missing}" in exc_info.value.message


def test_empty_value_counts_as_present(env):
    env.setenv("CATENAX_API_KEY", "")
    assert load_settings(_env_file=None).CATENAX_API_KEY == ""


@pytest.mark.parametrize("raw, expected", [("true", True), ("1", True), ("F", False), ("quizas", False)])
def test_debug_parsing(env, raw, expected):
    env.setenv("DEBUG", raw)
    settings = load_settings(_env_file=None)

    assert settings.DEBUG is expected
    assert settings.effective_log_level == ("DEBUG" if expected else "INFO")


def test_skip_toggle_from_env(env):
    env.setenv("SKIP_CASES_WITHOUT_COUNTRY", "true")
    assert load_settings(_env_file=None).SKIP_CASES_WITHOUT_COUNTRY is True


def test_invalid_optional_value_is_configuration_error(env):
    env.setenv("REQUEST_TIMEOUT_S", "-1")

    with pytest.raises(ConfigurationError, match="invalida"):
        load_settings(_env_file=None)


def test_public_summary_hides_secrets(settings):
    summary = settings.public_summary()

    assert "CATENAX_API_KEY" not in summary
    assert "SENTRY_DSN" not in summary
    assert "RMQ_AMQP_URL" not in summary
    assert summary["RMQ_QUEUE_NAME"] == "fraud-cases-sync"
