"""Tests for the `stripe-facade` command line."""

import pytest
from typer.testing import CliRunner

from stripe_facade.cli import doctor
from stripe_facade.cli import main as cli_main
from stripe_facade.core.config import Config, _parse_env_lines, write_user_env_vars
from stripe_facade.core.services.facade import Stripe

runner = CliRunner()


@pytest.fixture
def patched_stripe(monkeypatch, stub):
    def factory(*args, config=None, **kwargs):
        config = config or Config(api_key="sk_test_cli_1234567890", _env_file=None)
        return Stripe(config=config, transport=stub.transport)

    monkeypatch.setattr(cli_main, "Stripe", factory)
    monkeypatch.setattr(doctor, "Stripe", factory)
    return factory


class TestListCommand:
    def test_lists_objects(self, patched_stripe, stub):
        stub.queue(
            {
                "object": "list",
                "has_more": False,
                "data": [
                    {"id": "ch_1", "object": "charge", "created": 1451606400},
                    {"id": "ch_2", "object": "charge"},
                ],
            }
        )

        result = runner.invoke(cli_main.app, ["list", "charges", "--limit", "5"])

        assert result.exit_code == 0, result.output
        assert "ch_1" in result.output
        assert "ch_2" in result.output
        assert "2016-01-01" in result.output
        assert stub.last_request.url.params["limit"] == "5"

    def test_nested_resource(self, patched_stripe, stub):
        stub.queue({"object": "list", "has_more": False, "data": [{"id": "card_1", "object": "card"}]})

        result = runner.invoke(cli_main.app, ["list", "cards", "cus_1"])

        assert result.exit_code == 0, result.output
        assert "card_1" in result.output
        assert stub.last_request.url.path == "/v1/customers/cus_1/sources"

    def test_unknown_resource(self, patched_stripe, stub):
        result = runner.invoke(cli_main.app, ["list", "widgets"])

        assert result.exit_code != 0
        assert stub.requests == []

    def test_resource_without_listing(self, patched_stripe, stub):
        result = runner.invoke(cli_main.app, ["list", "tokens"])

        assert result.exit_code != 0
        assert stub.requests == []

    def test_api_error(self, patched_stripe, stub):
        stub.queue({"error": {"type": "authentication_error", "message": "Invalid API Key provided"}}, status_code=401)

        result = runner.invoke(cli_main.app, ["list", "charges"])

        assert result.exit_code == 1
        assert "UnauthorizedError" in result.output


class TestDoctor:
    def test_run_ok(self, monkeypatch, patched_stripe, stub):
        monkeypatch.setattr(doctor, "Config", lambda: Config(api_key="sk_test_cli_1234567890", _env_file=None))
        stub.queue({"object": "balance", "livemode": False, "available": []})

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "test mode" in result.output
        assert stub.last_request.url.path == "/v1/balance"

    def test_run_without_api_key(self, monkeypatch, patched_stripe, stub):
        monkeypatch.setattr(doctor, "Config", lambda: Config(_env_file=None))

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 1
        assert "not defined" in result.output
        assert stub.requests == []

    def test_run_with_rejected_key(self, monkeypatch, patched_stripe, stub):
        monkeypatch.setattr(doctor, "Config", lambda: Config(api_key="sk_test_cli_1234567890", _env_file=None))
        stub.queue({"error": {"type": "authentication_error", "message": "Invalid API Key provided"}}, status_code=401)

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 1
        assert "FAIL" in result.output

    def test_setup_writes_user_env(self, monkeypatch, tmp_path):
        env_path = tmp_path / "user" / ".env"
        monkeypatch.setattr(doctor, "write_user_env_vars", lambda values: write_user_env_vars(values, env_path=env_path))

        result = runner.invoke(cli_main.app, ["doctor", "setup"], input="sk_test_saved\n\n")

        assert result.exit_code == 0, result.output
        assert _parse_env_lines(env_path.read_text(encoding="utf-8")) == {
            "STRIPE_API_KEY": "sk_test_saved",
            "STRIPE_API_VERSION": "2016-07-06",
        }

    def test_setup_rejects_publishable_key(self, monkeypatch, tmp_path):
        monkeypatch.setattr(doctor, "write_user_env_vars", lambda values: write_user_env_vars(values, env_path=tmp_path / ".env"))

        result = runner.invoke(cli_main.app, ["doctor", "setup"], input="pk_test_nope\n\n")

        assert result.exit_code != 0
        assert not (tmp_path / ".env").exists()
