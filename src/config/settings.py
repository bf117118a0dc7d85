"""Pydantic Settings for the dashboard client.

All environment variables use the AFFLYT_ prefix.
Example: AFFLYT_API_URL=https://api.afflyt.io, AFFLYT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_API_URL = "http://localhost:3001"


class DashboardSettings(BaseSettings):
    """Dashboard client configuration validated from environment variables."""

    # Backend
    api_url: str = Field(default=DEFAULT_API_URL, min_length=1)
    request_timeout_seconds: float | None = Field(default=None, gt=0)  # None = no explicit timeout

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    model_config = {"env_prefix": "AFFLYT_"}
