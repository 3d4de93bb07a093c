"""
Tests for the CLI, with StarlingClient backed by a recording transport.
"""
import pytest
from typer.testing import CliRunner

from starling.cli import main as cli_main
from starling.client import StarlingClient
from tests.conftest import ACCOUNT_UID, API_URL, TOKEN, RecordingTransport

runner = CliRunner()


@pytest.fixture
def recording(monkeypatch, settings):
    transport = RecordingTransport(
        payload={
            "accounts": [
                {"accountUid": ACCOUNT_UID, "name": "Personal", "accountType": "PRIMARY", "currency": "GBP"}
            ],
            "effectiveBalance": {"currency": "GBP", "minorUnits": 12345},
        }
    )

    def factory():
        return StarlingClient(settings, transport=transport, api_url=API_URL, access_token=TOKEN)

    monkeypatch.setattr(cli_main, "StarlingClient", factory)
    return transport


class TestCommands:
    def test_accounts(self, recording):
        result = runner.invoke(cli_main.app, ["accounts"])
        assert result.exit_code == 0, result.output
        assert "Personal" in result.output
        assert recording.last.url == f"{API_URL}/api/v2/accounts"

    def test_balance(self, recording):
        result = runner.invoke(cli_main.app, ["balance", "--account-uid", ACCOUNT_UID])
        assert result.exit_code == 0, result.output
        assert "123.45 GBP" in result.output

    def test_invalid_account_uid_exits_2(self, recording):
        result = runner.invoke(cli_main.app, ["balance", "--account-uid", "nope"])
        assert result.exit_code == 2
        assert "account_uid" in result.output
        assert recording.requests == []

    def test_statement(self, recording, tmp_path):
        output = tmp_path / "statement.csv"
        result = runner.invoke(
            cli_main.app,
            ["statement", "--account-uid", ACCOUNT_UID, "--year-month", "2024-01", "--output", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert output.exists()
        assert recording.last.params == {"yearMonth": "2024-01"}
        assert recording.last.headers["Accept"] == "text/csv"

    def test_doctor_offline(self, monkeypatch):
        monkeypatch.setenv("STARLING_ACCESS_TOKEN", "t")
        result = runner.invoke(cli_main.app, ["doctor", "run", "--offline"])
        assert result.exit_code == 0, result.output
        assert "Access token" in result.output
