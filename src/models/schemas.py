"""Resource shapes returned by the dashboard API.

The API speaks camelCase; models expose snake_case attributes and accept
either spelling. Numeric counters default to zero and optional fields to None
so that partial payloads still validate.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for camelCase wire payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class DataPeriod(ApiModel):
    """Date range a statistics summary covers."""

    start_date: str | None = None
    end_date: str | None = None


class StatsData(ApiModel):
    """Aggregate counters for the stats summary widget."""

    total_links: int = 0
    total_clicks: int = 0
    unique_clicks: int = 0
    total_conversions: int = 0
    pending_conversions: int = 0
    rejected_conversions: int = 0
    total_revenue: float = 0.0
    conversion_rate: float = 0.0
    earnings_per_click: float = 0.0
    data_period: DataPeriod | None = None


class ClickTrendData(ApiModel):
    """One time bucket of the clicks trend series."""

    date: str
    clicks: int = 0
    unique_clicks: int = 0


class RevenueTrendData(ApiModel):
    """One time bucket of the revenue trend series."""

    date: str
    revenue: float = 0.0
    conversions: int = 0


class LinkStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class LinkData(ApiModel):
    """A short affiliate link."""

    hash: str
    original_url: str
    tag: str | None = None
    click_count: int = 0
    created_at: str | None = None
    status: LinkStatus = LinkStatus.ACTIVE
    metadata: dict[str, Any] | None = None


class Pagination(ApiModel):
    total: int = 0
    page: int = 1
    limit: int = 0
    total_pages: int = 0


class LinksResponse(ApiModel):
    """Paginated list of links."""

    links: list[LinkData] = []
    pagination: Pagination = Pagination()


class UserProfile(ApiModel):
    """Authenticated user's profile."""

    id: str | None = None
    email: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company_name: str | None = None
    role: str | None = None
    is_email_verified: bool = False


class HealthStatus(ApiModel):
    """Liveness check payload."""

    status: str
    timestamp: str | None = None


class ApiInfo(ApiModel):
    """Version info payload."""

    version: str | None = None
    environment: str | None = None
