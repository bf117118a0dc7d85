"""Public models for the dashboard client."""

from src.models.requests import (
    ClicksTrendOptions,
    CreateLinkRequest,
    LinkSortField,
    LinksOptions,
    NoOptions,
    QueryOptions,
    RevenueTrendOptions,
    SortOrder,
    StatsOptions,
    TrendGranularity,
    TrendOptions,
    TrendPeriod,
)
from src.models.responses import Envelope, ErrorDetail
from src.models.schemas import (
    ApiInfo,
    ApiModel,
    ClickTrendData,
    DataPeriod,
    HealthStatus,
    LinkData,
    LinksResponse,
    LinkStatus,
    Pagination,
    RevenueTrendData,
    StatsData,
    UserProfile,
)

__all__ = [
    "ApiInfo",
    "ApiModel",
    "ClickTrendData",
    "ClicksTrendOptions",
    "CreateLinkRequest",
    "DataPeriod",
    "Envelope",
    "ErrorDetail",
    "HealthStatus",
    "LinkData",
    "LinkSortField",
    "LinkStatus",
    "LinksOptions",
    "LinksResponse",
    "NoOptions",
    "Pagination",
    "QueryOptions",
    "RevenueTrendData",
    "RevenueTrendOptions",
    "SortOrder",
    "StatsData",
    "StatsOptions",
    "TrendGranularity",
    "TrendOptions",
    "TrendPeriod",
    "UserProfile",
]
