"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from rondomundi.core.constants import MAX_TICKETS_PER_PURCHASE


class Settings(BaseSettings):
    """Rondo Mundi application settings."""

    # App
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # CORS
    cors_origins: str = "*"  # Comma-separated origins

    # Lottery rules: may lower the per-purchase limit, never raise it
    max_tickets_per_purchase: int = Field(
        default=MAX_TICKETS_PER_PURCHASE, ge=1, le=MAX_TICKETS_PER_PURCHASE
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        return self.app_env == "testing"

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        if self.cors_origins == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def get_settings() -> Settings:
    """Return a settings instance built from the current environment."""
    return Settings()
