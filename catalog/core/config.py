"""
Application configuration.

All values come from environment variables (or a local .env file); every
field has a development-friendly default.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseSettings):
    """In-memory catalog store configuration."""

    model_config = SettingsConfigDict(env_prefix="STORE_", env_file=".env", extra="ignore")

    # Probability that list_all() fails with a simulated transient error
    failure_rate: float = Field(default=0.3, ge=0.0, le=1.0)
    # Load the demo catalog when the application starts
    seed_on_startup: bool = True


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"
    # "console" for colored development output, "json" for structured logs
    format: str = "console"


class MetricsConfig(BaseSettings):
    """Prometheus metrics configuration."""

    model_config = SettingsConfigDict(env_prefix="METRICS_", env_file=".env", extra="ignore")

    enabled: bool = True


class AppConfig(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    name: str = "ItemCatalog"
    version: str = "1.0.0"
    debug: bool = False
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


class Settings:
    """Aggregates every configuration section."""

    def __init__(self) -> None:
        self.app = AppConfig()
        self.store = StoreConfig()
        self.logging = LoggingConfig()
        self.metrics = MetricsConfig()


@lru_cache
def get_settings() -> Settings:
    """Return the settings singleton (cached)."""
    return Settings()


settings = get_settings()
