import pytest

from quora.config import DEFAULT_CORS_ORIGINS, get_settings, refresh_settings_cache


def test_defaults(monkeypatch):
    for var in ("ACCESS_TOKEN_TTL_HOURS", "ADMIN_USERNAMES", "CORS_ALLOWED_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    refresh_settings_cache()
    settings = get_settings()
    assert settings.access_token_ttl_hours == 8
    assert settings.admin_usernames == frozenset()
    assert settings.cors_allowed_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_TTL_HOURS", "2")
    monkeypatch.setenv("ADMIN_USERNAMES", " Root , 'ops',, ")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://qa.example.com,https://www.example.com")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    refresh_settings_cache()
    settings = get_settings()
    assert settings.access_token_ttl_hours == 2
    assert settings.admin_usernames == frozenset({"root", "ops"})
    assert settings.cors_allowed_origins == ("https://qa.example.com", "https://www.example.com")
    assert settings.log_level == "DEBUG"


def test_settings_are_cached_until_refreshed(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_TTL_HOURS", "3")
    refresh_settings_cache()
    assert get_settings().access_token_ttl_hours == 3
    monkeypatch.setenv("ACCESS_TOKEN_TTL_HOURS", "5")
    assert get_settings().access_token_ttl_hours == 3
    refresh_settings_cache()
    assert get_settings().access_token_ttl_hours == 5


@pytest.mark.parametrize("value", ["0", "-4", "eight"])
def test_invalid_ttl_rejected(monkeypatch, value):
    monkeypatch.setenv("ACCESS_TOKEN_TTL_HOURS", value)
    refresh_settings_cache()
    with pytest.raises(ValueError):
        get_settings()
