"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Host settings loaded from environment variables."""

    # Header stamped on every response by the Flask host
    header_name: str = "Date"
    stamp_responses: bool = True

    # Keep a Date header a view already set unless this is on
    overwrite_existing: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HTTPDT_",
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
