"""
Configuration settings for the oEQ client.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """
    Configuration for the oEQ API client.

    Settings are loaded from environment variables with OEQ_ prefix.
    Example: OEQ_BASE_URL, OEQ_TIMEOUT, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="OEQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: Optional[str] = Field(
        default=None,
        description="Base URL that relative request paths resolve against"
    )

    # HTTP client settings
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )
    user_agent: str = Field(
        default="oeq-client",
        min_length=1,
        description="User-Agent header sent with every request"
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether to follow HTTP redirects"
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify TLS certificates"
    )
