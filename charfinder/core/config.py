"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The dataset location is configuration handed to the
loader, never a module constant read by it.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_dataset_source rejects values the
    loader cannot work with.
    """

    # App
    app_name: str = "charfinder"
    app_version: str = "1.0.0"
    debug: bool = False

    # Dataset source: remote registry file and its local cached copy
    unicode_data_url: str = "http://www.unicode.org/Public/UNIDATA/UnicodeData.txt"
    unicode_data_path: str = "UnicodeData.txt"
    download_timeout_seconds: float = 30.0

    # Dataset lifecycle: load at startup, keep in memory, build the token index
    dataset_preload: bool = False
    dataset_cache_enabled: bool = True
    name_index_enabled: bool = True

    # Request parsing
    query_param_name: str = "query"

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_dataset_source(self) -> "Settings":
        """Require a dataset URL and path, a positive timeout and a parameter name."""
        if not self.unicode_data_url:
            raise ValueError("UNICODE_DATA_URL must not be empty.")
        if not self.unicode_data_path:
            raise ValueError("UNICODE_DATA_PATH must not be empty.")
        if self.download_timeout_seconds <= 0:
            raise ValueError(
                f"DOWNLOAD_TIMEOUT_SECONDS must be positive, got: {self.download_timeout_seconds!r}"
            )
        if not self.query_param_name:
            raise ValueError("QUERY_PARAM_NAME must not be empty.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
