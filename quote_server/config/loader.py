"""Env var config loading with pydantic-settings."""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()

_SECURITY_HEADERS_PATH = Path(__file__).parent / "security_headers.yaml"


class QuoteSettings(BaseSettings):
    """Server configuration from env vars. Immutable once constructed."""

    model_config = SettingsConfigDict(
        env_prefix="QUOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    host: str = "0.0.0.0"
    port: int = 3031
    environment: str = "development"
    log_level: str = "info"
    log_json: bool = True

    # Directory holding index.html, about-us.html, success.html and assets/
    site_root: str = "site"
    security_headers_file: str = str(_SECURITY_HEADERS_PATH)

    # Protective headers (CSP + HSTS)
    protective_headers_enabled: bool = True
    hsts_max_age: int = 31536000
    hsts_include_subdomains: bool = True
    hsts_preload: bool = True

    # Cross-origin policy; allowed_origins is comma-separated
    cors_enabled: bool = True
    allowed_origins: str = "http://localhost:3031,http://127.0.0.1:3031"

    # Rate limiting on /api/ paths
    rate_limit_enabled: bool = True
    rate_limit_window_seconds: int = 900  # 15 minutes
    rate_limit_max_requests: int = 100
    rate_limit_backend: str = "memory"  # "memory" or "redis"
    redis_url: str = "redis://localhost:6379"

    # Compression
    compression_enabled: bool = True
    compression_level: int = 6
    compression_threshold: int = 1024

    # Request body limit (10MB)
    max_body_bytes: int = 10 * 1024 * 1024

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> tuple[str, ...]:
        return tuple(o.strip() for o in self.allowed_origins.split(",") if o.strip())


_settings: QuoteSettings | None = None


def get_settings() -> QuoteSettings:
    """Get or create the singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def load_settings() -> QuoteSettings:
    """Load settings from env vars (env vars override model defaults)."""
    global _settings
    _settings = QuoteSettings()
    logger.info("config_loaded", port=_settings.port, environment=_settings.environment)
    return _settings
