"""
Tests for settings and the user .env helpers.
"""
from starling.core.config import StarlingSettings, _parse_env_lines, write_user_env_vars


class TestSettings:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("STARLING_API_URL", "https://api-sandbox.starlingbank.com/")
        monkeypatch.setenv("STARLING_ACCESS_TOKEN", "abc")
        settings = StarlingSettings(_env_file=None)
        assert settings.access_token == "abc"
        defaults = settings.to_defaults()
        assert defaults["api_url"] == "https://api-sandbox.starlingbank.com"
        assert defaults["access_token"] == "abc"

    def test_to_defaults_skips_unset(self, settings):
        defaults = settings.to_defaults()
        assert "access_token" not in defaults
        assert "account_uid" not in defaults
        assert "redirect_uri" not in defaults

    def test_secrets_hidden_from_repr(self, monkeypatch):
        monkeypatch.setenv("STARLING_ACCESS_TOKEN", "super-secret")
        assert "super-secret" not in repr(StarlingSettings(_env_file=None))


class TestUserEnv:
    def test_write_and_update(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"
        write_user_env_vars({"STARLING_API_URL": "https://a", "STARLING_ACCESS_TOKEN": "t"}, env_path)
        write_user_env_vars({"STARLING_ACCESS_TOKEN": "t2", "STARLING_ACCOUNT_UID": None}, env_path)
        values = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        assert values == {"STARLING_API_URL": "https://a", "STARLING_ACCESS_TOKEN": "t2"}

    def test_parse_ignores_comments_and_quotes(self):
        text = "# comment\nA='1'\nB=\"2\"\nnot a pair\n"
        assert _parse_env_lines(text) == {"A": "1", "B": "2"}
