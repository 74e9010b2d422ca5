"""
Admin panel settings.

Dependencies: pydantic_settings
System role: Access configuration for the content-management API
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tourbook.configs.base import BaseSettings


class AdminSettings(BaseSettings):
    """Admin API access configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ADMIN_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Key expected in the X-Admin-Key header. Unset means demo mode (open).",
    )
