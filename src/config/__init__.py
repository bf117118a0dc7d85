"""Configuration module."""

from src.config.settings import DEFAULT_API_URL, DashboardSettings

__all__ = [
    "DEFAULT_API_URL",
    "DashboardSettings",
]
