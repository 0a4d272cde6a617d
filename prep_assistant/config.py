"""
Application configuration using Pydantic Settings.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )
    
    # Application
    app_name: str = "Interview Prep Assistant"
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]
    
    # Providers. An empty base URL means the pages talk to this
    # application's own API in-process.
    provider_base_url: str = ""
    # Only enforced for a remote provider_base_url; httpx does not apply
    # timeouts to the in-process ASGI transport.
    provider_timeout_seconds: float = 10.0
    
    # Display
    display_timezone: str = "UTC"
    
    # Brief generation
    profile_url_placeholder: str = "N/A"
    strict_profile_urls: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
