from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_SENTINEL = "YOUR_TMDB_API_KEY"


class Settings(BaseSettings):
    tmdb_api_key: str = API_KEY_SENTINEL
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_language: str = "en-US"
    request_timeout: float = 10.0
    search_debounce_ms: int = 500
    fallback_default_to_first: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
