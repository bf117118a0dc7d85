"""Pydantic option models for resource queries and link creation."""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict, Field

from src.models.schemas import ApiModel


class TrendPeriod(str, Enum):
    """Time window of a trend series."""

    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    LAST_12_MONTHS = "12m"


class TrendGranularity(str, Enum):
    """Bucket size of a trend series."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class LinkSortField(str, Enum):
    CREATED_AT = "createdAt"
    CLICK_COUNT = "clickCount"
    TAG = "tag"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class QueryOptions(ApiModel):
    """Base for immutable query options; equal options mean equal dependencies."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class NoOptions(QueryOptions):
    """Options for endpoints that take no query parameters."""


class StatsOptions(QueryOptions):
    """Date range for the stats summary."""

    start_date: str | None = None
    end_date: str | None = None


class TrendOptions(QueryOptions):
    """Filters shared by the revenue and clicks trend series."""

    period: TrendPeriod = TrendPeriod.LAST_30_DAYS
    granularity: TrendGranularity | None = None
    link_id: str | None = None
    sub_id: str | None = None


class RevenueTrendOptions(TrendOptions):
    period: TrendPeriod = TrendPeriod.LAST_30_DAYS


class ClicksTrendOptions(TrendOptions):
    period: TrendPeriod = TrendPeriod.LAST_7_DAYS


class LinksOptions(QueryOptions):
    """Paging and sorting for the links list."""

    limit: int | None = Field(default=None, ge=1)
    page: int | None = Field(default=None, ge=1)
    sort_by: LinkSortField | None = None
    sort_order: SortOrder | None = None


class CreateLinkRequest(ApiModel):
    """Body of a link creation call."""

    original_url: str = Field(..., min_length=1)
    tag: str | None = None
    amazon_tag_id: str | None = None
    channel_id: str | None = None
    source: str | None = Field(default=None, max_length=100)

    def to_body(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
