from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    word_source: str = "faker"
    faker_locale: str = "en_US"
    random_seed: int | None = None

    output_indent: int = 2
