from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Jokebox"
    # Default to SQLite for local development; override via .env
    database_url: str = "sqlite:///./jokebox.db"
    joke_api_base_url: str = "https://official-joke-api.appspot.com"
    # None means wait for the provider indefinitely
    request_timeout: float | None = None
    notification_seconds: float = 3.0
    share_title: str = "Check out this joke!"
    share_attribution: str = "- Shared from JokesApp"
    client_cookie_name: str = "jokebox_client"
    client_cookie_max_age_days: int = 365
    # Browsers whose in-memory session is kept at once
    max_clients: int = 1000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
