"""Tests for environment loading and client configuration."""

import pytest

from payment_sources import (
    ClientConfig,
    ClientParameters,
    ConfigError,
    load_client_config,
    resolve_settings,
)

KEY = "pk_test_123"


def test_defaults_from_mapping():
    config = ClientConfig.from_mapping({"PAYMENT_SOURCES_PUBLISHABLE_KEY": KEY})

    assert config.api_base == "https://api.stripe.com"
    assert config.sources_url == "https://api.stripe.com/v1/sources"
    assert config.timeout_seconds == 30
    assert config.headers() == {"Authorization": f"Bearer {KEY}"}


def test_api_version_header_and_trailing_slash():
    config = ClientConfig.from_mapping(
        {
            "PAYMENT_SOURCES_PUBLISHABLE_KEY": KEY,
            "PAYMENT_SOURCES_API_BASE": "http://localhost:12111/",
            "PAYMENT_SOURCES_API_VERSION": "2017-06-05",
        }
    )

    assert config.sources_url == "http://localhost:12111/v1/sources"
    assert config.headers()["Stripe-Version"] == "2017-06-05"


@pytest.mark.parametrize(
    "values",
    [
        {},
        {"PAYMENT_SOURCES_PUBLISHABLE_KEY": "  "},
        {"PAYMENT_SOURCES_PUBLISHABLE_KEY": "sk_test_123"},
        {"PAYMENT_SOURCES_PUBLISHABLE_KEY": KEY, "PAYMENT_SOURCES_API_BASE": "ftp://x"},
        {"PAYMENT_SOURCES_PUBLISHABLE_KEY": KEY, "PAYMENT_SOURCES_TIMEOUT_SECONDS": "0"},
        {"PAYMENT_SOURCES_PUBLISHABLE_KEY": KEY, "PAYMENT_SOURCES_TIMEOUT_SECONDS": "soon"},
    ],
)
def test_invalid_configuration(values):
    with pytest.raises(ConfigError):
        ClientConfig.from_mapping(values)


def test_env_file_fills_gaps_and_overrides_win(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "PAYMENT_SOURCES_PUBLISHABLE_KEY=pk_test_file\n"
        'export PAYMENT_SOURCES_API_VERSION="2017-06-05"\n'
        "PAYMENT_SOURCES_TIMEOUT_SECONDS=10\n",
        encoding="utf-8",
    )

    settings = resolve_settings(
        env_file=str(env_file),
        base={"PAYMENT_SOURCES_TIMEOUT_SECONDS": "20"},
        overrides={"PAYMENT_SOURCES_API_BASE": "https://sandbox.example.com"},
    )

    assert settings == {
        "PAYMENT_SOURCES_PUBLISHABLE_KEY": "pk_test_file",
        "PAYMENT_SOURCES_API_VERSION": "2017-06-05",
        "PAYMENT_SOURCES_TIMEOUT_SECONDS": "20",
        "PAYMENT_SOURCES_API_BASE": "https://sandbox.example.com",
    }


def test_unrelated_variables_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=postgres://db\nnot an assignment\n", encoding="utf-8")

    settings = resolve_settings(
        env_file=str(env_file),
        base={"HOME": "/root", "PAYMENT_SOURCES_API_VERSION": "2017-06-05"},
    )

    assert settings == {"PAYMENT_SOURCES_API_VERSION": "2017-06-05"}


def test_missing_env_file_is_ignored(tmp_path):
    assert resolve_settings(env_file=str(tmp_path / "missing.env"), base={}) == {}


def test_misspelled_setting_is_rejected(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PAYMENT_SOURCES_PUBLISHABLE=pk_test_123\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="PAYMENT_SOURCES_PUBLISHABLE"):
        resolve_settings(env_file=str(env_file), base={})

    with pytest.raises(ConfigError):
        resolve_settings(env_file=None, base={}, overrides={"PAYMENT_SOURCES_TIMEOUT": "5"})


def test_setting_without_value_is_rejected(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PAYMENT_SOURCES_API_BASE\n", encoding="utf-8")

    with pytest.raises(ConfigError, match=":1:"):
        resolve_settings(env_file=str(env_file), base={})


def test_keyword_parameters_override_environment():
    config = load_client_config(
        env_file=None,
        base={"PAYMENT_SOURCES_PUBLISHABLE_KEY": "pk_test_env"},
        parameters=ClientParameters(timeout_seconds=5),
        publishable_key=KEY,
    )

    assert config.publishable_key == KEY
    assert config.timeout_seconds == 5
