"""Centralized application settings using pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Environment-aware configuration (upstream credentials, paths, CORS)."""

    # Application
    app_name: str = "ACN Pet Store"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # Static front-end and catalog seed
    public_dir: Path = Field(
        default=PACKAGE_DIR.parent / "public",
        description="Directory holding the single-page app and its assets",
    )
    products_file: Path = Field(
        default=PACKAGE_DIR / "data" / "products.json",
        description="JSON file the catalog snapshot is loaded from",
    )

    # CORS, comma separated; "*" allows everything
    cors_origins_raw: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # Upstream APIs
    upstream_timeout: float = 10.0
    abandoned_api_key: str = Field(default="", validation_alias="ACN_ABANDONED_API_KEY")
    coupang_api_key: str = ""
    coupang_secret_key: str = ""
    coupang_access_token: str = ""
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated string to list."""
        origins = [
            origin.strip().rstrip("/")
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for dependency injection."""
    return Settings()
