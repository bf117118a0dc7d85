"""Per-endpoint resource adapters."""

from src.resources.account import USER_PROFILE
from src.resources.analytics import CLICKS_TREND, REVENUE_TREND, STATS_SUMMARY
from src.resources.base import ResourceAdapter
from src.resources.links import CREATE_LINK_PATH, LINKS, create_link
from src.resources.registry import AdapterRegistry, default_registry

__all__ = [
    "AdapterRegistry",
    "CLICKS_TREND",
    "CREATE_LINK_PATH",
    "LINKS",
    "REVENUE_TREND",
    "ResourceAdapter",
    "STATS_SUMMARY",
    "USER_PROFILE",
    "create_link",
    "default_registry",
]
