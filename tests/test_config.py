"""
Credentials tests.

These tests verify creating, loading and saving credentials, including the
failure modes of the credentials file.
"""

import pytest

from twitch_client import Credentials, TwitchConfigError


class TestCredentials:
    """Test suite for Credentials."""

    def test_new_credentials_have_empty_token(self):
        creds = Credentials("my_client_id")

        assert creds.client_id == "my_client_id"
        assert creds.token == ""

    def test_client_id_is_read_only(self):
        creds = Credentials("my_client_id")

        with pytest.raises(AttributeError):
            creds.client_id = "other"

    def test_set_token(self):
        creds = Credentials("my_client_id")
        creds.set_token("tok")

        assert creds.token == "tok"

    def test_repr_masks_token(self):
        creds = Credentials("my_client_id", "secret_token")

        assert "secret_token" not in repr(creds)
        assert "my_client_id" in repr(creds)

    def test_equal_by_value_and_unhashable(self):
        assert Credentials("abc", "tok") == Credentials("abc", "tok")
        assert Credentials("abc", "tok") != Credentials("abc", "other")

        with pytest.raises(TypeError):
            hash(Credentials("abc"))


class TestCredentialsFile:
    """Test suite for the TOML credentials file."""

    def test_save_and_load_round_trip(self, credentials_file):
        creds = Credentials("uo6dggojyb8d6soh92zknwmi5ej1q2")
        creds.set_token("cfabdegwdoklmawdzdo98xt2fo512y")

        creds.save_to_file(credentials_file)
        loaded = Credentials.load_from_file(credentials_file)

        assert loaded.client_id == creds.client_id
        assert loaded.token == creds.token
        assert loaded == creds

    def test_saved_file_layout(self, credentials_file):
        Credentials("abc", "def").save_to_file(credentials_file)

        content = credentials_file.read_text(encoding="utf-8")
        assert 'client_id = "abc"' in content
        assert 'token = "def"' in content

    def test_save_overwrites(self, credentials_file):
        Credentials("abc", "old").save_to_file(credentials_file)
        Credentials("abc", "new").save_to_file(credentials_file)

        assert Credentials.load_from_file(credentials_file).token == "new"

    def test_load_accepts_str_path(self, credentials_file):
        credentials_file.write_text('client_id = "abc"\ntoken = ""\n', encoding="utf-8")

        assert Credentials.load_from_file(str(credentials_file)) == Credentials("abc")

    def test_unknown_fields_are_ignored(self, credentials_file):
        credentials_file.write_text(
            'client_id = "abc"\ntoken = "def"\nchannel_id = "123"\n', encoding="utf-8"
        )

        assert Credentials.load_from_file(credentials_file) == Credentials("abc", "def")

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.toml"

        with pytest.raises(TwitchConfigError, match="reading") as exc_info:
            Credentials.load_from_file(path)

        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_invalid_toml(self, credentials_file):
        credentials_file.write_text("client_id = abc without quotes", encoding="utf-8")

        with pytest.raises(TwitchConfigError, match="parsing"):
            Credentials.load_from_file(credentials_file)

    @pytest.mark.parametrize(
        "content, field",
        [
            ('token = "def"\n', "client_id"),
            ('client_id = "abc"\n', "token"),
        ],
    )
    def test_missing_field(self, credentials_file, content, field):
        credentials_file.write_text(content, encoding="utf-8")

        with pytest.raises(TwitchConfigError, match=field):
            Credentials.load_from_file(credentials_file)

    def test_non_string_field(self, credentials_file):
        credentials_file.write_text('client_id = 42\ntoken = ""\n', encoding="utf-8")

        with pytest.raises(TwitchConfigError, match="must be a string"):
            Credentials.load_from_file(credentials_file)

    def test_save_to_unwritable_path(self, tmp_path):
        path = tmp_path / "no" / "such" / "dir" / "credentials.toml"

        with pytest.raises(TwitchConfigError, match="writing") as exc_info:
            Credentials("abc").save_to_file(path)

        assert exc_info.value.path == str(path)


class TestCredentialsFromEnv:
    """Test suite for loading credentials from environment variables."""

    def test_from_env_variables(self, monkeypatch):
        monkeypatch.setenv("TWITCH_CLIENT_ID", "env_client_id")
        monkeypatch.setenv("TWITCH_TOKEN", "env_token")

        creds = Credentials.from_env()

        assert creds.client_id == "env_client_id"
        assert creds.token == "env_token"

    def test_token_defaults_to_empty(self, monkeypatch):
        monkeypatch.setenv("TWITCH_CLIENT_ID", "env_client_id")
        monkeypatch.delenv("TWITCH_TOKEN", raising=False)

        assert Credentials.from_env().token == ""

    def test_missing_client_id(self, monkeypatch):
        monkeypatch.delenv("TWITCH_CLIENT_ID", raising=False)

        with pytest.raises(TwitchConfigError, match="client ID"):
            Credentials.from_env()

    def test_parameters_override_env(self, monkeypatch):
        monkeypatch.setenv("TWITCH_CLIENT_ID", "env_client_id")
        monkeypatch.setenv("TWITCH_TOKEN", "env_token")

        creds = Credentials.from_env(client_id="param_id", token="param_token")

        assert creds.client_id == "param_id"
        assert creds.token == "param_token"

    def test_explicit_empty_token_not_replaced_by_env(self, monkeypatch):
        monkeypatch.setenv("TWITCH_CLIENT_ID", "env_client_id")
        monkeypatch.setenv("TWITCH_TOKEN", "env_token")

        creds = Credentials.from_env(token="")

        assert creds.token == ""
