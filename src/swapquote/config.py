"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swapquote.constants import DEFAULT_QUOTE_SLIPPAGE_PERCENTAGE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=3000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level when debug is off")

    # ======================
    # Chain
    # ======================
    chain_id: int = Field(default=1, description="Chain ID quotes and token lists are served for")
    default_quote_slippage_percentage: float = Field(
        default=DEFAULT_QUOTE_SLIPPAGE_PERCENTAGE,
        description="Slippage used when a request does not specify one",
    )

    # ======================
    # Quoter
    # ======================
    dry_run: bool = Field(default=True, description="Serve simulated quotes instead of upstream ones")
    quoter_api_url: str = Field(
        default="https://api.0x.org", description="Upstream 0x-compatible quote API"
    )
    quoter_api_key: Optional[str] = Field(default=None, description="Upstream API key")
    quoter_timeout: float = Field(default=30.0, description="Upstream request timeout in seconds")

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "dry_run": self.dry_run,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "chain_id": self.chain_id,
            "quoter": {
                "api_url": self.quoter_api_url,
                "api_key": "***" if self.quoter_api_key else "(not set)",
                "timeout": self.quoter_timeout,
                "default_slippage": self.default_quote_slippage_percentage,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
