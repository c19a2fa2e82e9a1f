import pytest
from pydantic import ValidationError

from classroom_tutor.config import Settings
from classroom_tutor.core.credentials import (
    EnvironmentCredentials,
    StaticCredentials,
    TokenFileCredentials,
    credentials_from_settings,
)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CLASSROOM_TUTOR_API_URL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.api_url == "https://api.aiclassroomtutor.com"
    assert settings.offline_fallback is False
    assert settings.local_backend_url == "http://127.0.0.1:8765"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CLASSROOM_TUTOR_API_URL", "http://localhost:9000/")
    monkeypatch.setenv("CLASSROOM_TUTOR_OFFLINE_FALLBACK", "true")
    monkeypatch.setenv("CLASSROOM_TUTOR_STUDENT_ID", "student_42")

    settings = Settings(_env_file=None)

    assert settings.api_url == "http://localhost:9000"
    assert settings.offline_fallback is True
    assert settings.student_id == "student_42"


def test_settings_reject_bad_timeout():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, request_timeout=0)


def test_static_credentials_fall_back_to_placeholder():
    assert StaticCredentials().get_token() == "mock-token"
    assert StaticCredentials("  ").get_token() == "mock-token"
    assert StaticCredentials("abc").get_token() == "abc"


def test_environment_credentials_read_each_time(monkeypatch):
    credentials = EnvironmentCredentials()
    monkeypatch.delenv("CLASSROOM_TUTOR_AUTH_TOKEN", raising=False)
    assert credentials.get_token() == "mock-token"

    monkeypatch.setenv("CLASSROOM_TUTOR_AUTH_TOKEN", "env-token")
    assert credentials.get_token() == "env-token"


def test_token_file_round_trip(tmp_path):
    credentials = TokenFileCredentials(tmp_path / "nested" / "token")
    assert credentials.get_token() == "mock-token"

    credentials.store_token(" stored ")
    assert credentials.get_token() == "stored"


def test_credentials_from_settings_precedence(tmp_path):
    assert isinstance(credentials_from_settings("abc", tmp_path / "token"), StaticCredentials)
    assert isinstance(credentials_from_settings(None, tmp_path / "token"), TokenFileCredentials)
    assert isinstance(credentials_from_settings(None, None), EnvironmentCredentials)
