"""Tests for the settings model and the user .env helpers."""

import pytest

from stripe_facade.core.config import (
    DEFAULT_API_VERSION,
    Config,
    _parse_env_lines,
    write_user_env_vars,
)
from stripe_facade.core.errors import ConfigError, StripeError
from stripe_facade.version import VERSION


class TestConfig:
    def test_explicit_values(self):
        config = Config(api_key="sk_test_123", api_version="2015-10-16", _env_file=None)
        assert config.api_key == "sk_test_123"
        assert config.api_version == "2015-10-16"
        assert config.idempotency_key is None

    def test_defaults(self):
        config = Config(api_key="sk_test_123", _env_file=None)
        assert config.api_version == DEFAULT_API_VERSION
        assert config.api_base == "https://api.stripe.com"
        assert config.uploads_base == "https://uploads.stripe.com"
        assert config.timeout_seconds == 30.0
        assert config.version == VERSION

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("STRIPE_API_KEY", "sk_test_from_env")
        monkeypatch.setenv("STRIPE_API_VERSION", "2016-03-07")
        config = Config(_env_file=None)
        assert config.api_key == "sk_test_from_env"
        assert config.api_version == "2016-03-07"

    def test_explicit_key_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("STRIPE_API_KEY", "sk_test_from_env")
        config = Config(api_key="sk_test_explicit", _env_file=None)
        assert config.api_key == "sk_test_explicit"

    def test_api_key_from_env_file(self, tmp_path):
        env_file = tmp_path / "stripe.env"
        env_file.write_text("STRIPE_API_KEY=sk_test_file\n", encoding="utf-8")
        config = Config(_env_file=env_file)
        assert config.api_key == "sk_test_file"

    def test_missing_api_key(self):
        with pytest.raises(ConfigError, match="The Stripe API key is not defined!"):
            Config(_env_file=None)

    def test_config_error_is_a_stripe_error(self):
        assert issubclass(ConfigError, StripeError)

    def test_assignment(self, config):
        config.api_key = "sk_test_other"
        config.api_version = "2016-07-06"
        config.idempotency_key = "order-42"
        assert config.api_key == "sk_test_other"
        assert config.idempotency_key == "order-42"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            Config(api_key="sk_test_123", timeout_seconds=0, _env_file=None)


class TestUserEnvFile:
    def test_parse_env_lines(self):
        text = '# comment\nSTRIPE_API_KEY="sk_test_1"\n\nINVALID\nSTRIPE_API_VERSION = 2016-07-06\n'
        assert _parse_env_lines(text) == {
            "STRIPE_API_KEY": "sk_test_1",
            "STRIPE_API_VERSION": "2016-07-06",
        }

    def test_write_user_env_vars_merges_existing_values(self, tmp_path):
        env_path = tmp_path / "config" / ".env"
        write_user_env_vars({"STRIPE_API_KEY": "sk_test_old", "OTHER": "1"}, env_path=env_path)
        write_user_env_vars({"STRIPE_API_KEY": "sk_test_new", "STRIPE_API_VERSION": None}, env_path=env_path)

        content = env_path.read_text(encoding="utf-8")
        assert content.splitlines()[0].startswith("#")
        assert _parse_env_lines(content) == {"OTHER": "1", "STRIPE_API_KEY": "sk_test_new"}
