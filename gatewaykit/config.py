"""
gatewaykit configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
Only the entry points and logging setup read it; the transcoding models do not.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_CONFIG_PATH = str(Path(__file__).parent / "logging.yml")


class GatewayKitConfig(BaseSettings):
    """
    Configuration for gatewaykit entry points.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default=DEFAULT_LOG_CONFIG_PATH, description="Logging definition file path"
    )
    LOG_EVENTS: bool = Field(default=False, description="Whether to log full inbound events")
    ECHO_MAX_BODY_LOG: int = Field(
        default=200, ge=0, description="Body characters included in echo handler logs"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


@lru_cache(maxsize=1)
def get_config() -> GatewayKitConfig:
    """Load config as a singleton."""
    return GatewayKitConfig()
