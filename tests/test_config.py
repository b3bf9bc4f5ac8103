from config import API_KEY_SENTINEL, Settings


def test_defaults_without_environment(monkeypatch):
    for var in (
        "TMDB_API_KEY",
        "TMDB_BASE_URL",
        "TMDB_LANGUAGE",
        "SEARCH_DEBOUNCE_MS",
        "FALLBACK_DEFAULT_TO_FIRST",
    ):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.tmdb_api_key == API_KEY_SENTINEL
    assert settings.tmdb_base_url == "https://api.themoviedb.org/3"
    assert settings.tmdb_language == "en-US"
    assert settings.search_debounce_ms == 500
    assert settings.fallback_default_to_first is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "abc123")
    monkeypatch.setenv("SEARCH_DEBOUNCE_MS", "250")
    monkeypatch.setenv("FALLBACK_DEFAULT_TO_FIRST", "false")

    settings = Settings(_env_file=None)

    assert settings.tmdb_api_key == "abc123"
    assert settings.search_debounce_ms == 250
    assert settings.fallback_default_to_first is False
