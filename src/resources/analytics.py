"""Analytics adapters: stats summary and trend series."""

from __future__ import annotations

from src.models.requests import ClicksTrendOptions, RevenueTrendOptions, StatsOptions
from src.models.schemas import ClickTrendData, RevenueTrendData, StatsData
from src.resources.base import ResourceAdapter

_TREND_QUERY = (
    ("period", "period"),
    ("granularity", "granularity"),
    ("link_id", "linkId"),
    ("sub_id", "subId"),
)

STATS_SUMMARY: ResourceAdapter[StatsOptions, StatsData] = ResourceAdapter(
    name="stats",
    path="/api/user/analytics/summary",
    options_model=StatsOptions,
    response_type=StatsData,
    query_fields=(
        ("start_date", "startDate"),
        ("end_date", "endDate"),
    ),
)

REVENUE_TREND: ResourceAdapter[RevenueTrendOptions, list[RevenueTrendData]] = ResourceAdapter(
    name="revenue_trend",
    path="/api/user/analytics/revenue-trend",
    options_model=RevenueTrendOptions,
    response_type=list[RevenueTrendData],
    query_fields=_TREND_QUERY,
)

CLICKS_TREND: ResourceAdapter[ClicksTrendOptions, list[ClickTrendData]] = ResourceAdapter(
    name="clicks_trend",
    path="/api/user/analytics/clicks-trend",
    options_model=ClicksTrendOptions,
    response_type=list[ClickTrendData],
    query_fields=_TREND_QUERY,
)
