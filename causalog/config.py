"""
Application configuration management.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from causalog.models.console import ConsoleConfig


class Settings(BaseSettings):
    """Settings loaded from CAUSALOG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CAUSALOG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Package logging
    log_level: str = "INFO"
    log_json: bool = True

    # Console defaults
    error_taming: Literal["safe", "unsafe"] = "safe"
    stack_filtering: Literal["concise", "verbose"] = "concise"
    wrap_with_causal: bool = False

    def console_config(self) -> ConsoleConfig:
        """Build the console configuration these settings describe."""
        return ConsoleConfig(
            error_taming=self.error_taming,
            stack_filtering=self.stack_filtering,
            wrap_with_causal=self.wrap_with_causal,
        )


# Global settings instance
settings = Settings()
