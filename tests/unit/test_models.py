"""Unit tests for Pydantic envelope and resource models."""

import pytest
from pydantic import ValidationError

from src.models.requests import CreateLinkRequest, LinksOptions, TrendPeriod
from src.models.responses import Envelope, ErrorDetail
from src.models.schemas import LinkData, LinkStatus, LinksResponse, StatsData, UserProfile


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class TestEnvelope:
    def test_success_envelope_with_data(self):
        env = Envelope(success=True, data={"key": "value"})
        assert env.success is True
        assert env.data == {"key": "value"}
        assert env.error is None

    def test_defaults(self):
        env = Envelope.model_validate({})
        assert env.success is False
        assert env.error_message() is None
        assert env.error_code() is None

    def test_plain_error_string(self):
        env = Envelope.model_validate({"success": False, "error": "Unauthorized"})
        assert env.error == "Unauthorized"
        assert env.error_message() == "Unauthorized"

    def test_nested_error_object(self):
        env = Envelope.model_validate(
            {"success": False, "error": {"message": "Not found", "code": "NOT_FOUND"}}
        )
        assert isinstance(env.error, ErrorDetail)
        assert env.error_message() == "Not found"
        assert env.error_code() == "NOT_FOUND"

    def test_top_level_code_wins(self):
        env = Envelope.model_validate(
            {"error": {"message": "x", "code": "INNER"}, "code": "OUTER"}
        )
        assert env.error_code() == "OUTER"

    def test_generic_with_list_data(self):
        env = Envelope[list[int]](success=True, data=[1, 2, 3])
        assert env.data == [1, 2, 3]


# ---------------------------------------------------------------------------
# Resource shapes
# ---------------------------------------------------------------------------


class TestStatsData:
    def test_camel_case_payload(self):
        stats = StatsData.model_validate(
            {"totalLinks": 5, "totalClicks": 1247, "dataPeriod": {"startDate": "2025-01-01"}}
        )
        assert stats.total_links == 5
        assert stats.total_clicks == 1247
        assert stats.data_period.start_date == "2025-01-01"
        assert stats.data_period.end_date is None

    def test_snake_case_also_accepted(self):
        assert StatsData(total_links=3).total_links == 3

    def test_counters_default_to_zero(self):
        stats = StatsData.model_validate({})
        assert stats.total_revenue == 0.0
        assert stats.pending_conversions == 0

    def test_serializes_back_to_camel_case(self):
        dumped = StatsData(total_links=1).model_dump(by_alias=True)
        assert dumped["totalLinks"] == 1


class TestLinkData:
    def test_required_fields(self):
        with pytest.raises(ValidationError):
            LinkData.model_validate({"hash": "abc"})

    def test_status_enum(self):
        link = LinkData.model_validate(
            {"hash": "abc", "originalUrl": "https://www.amazon.it/dp/B0X", "status": "inactive"}
        )
        assert link.status is LinkStatus.INACTIVE

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            LinkData.model_validate(
                {"hash": "abc", "originalUrl": "https://www.amazon.it/dp/B0X", "status": "gone"}
            )

    def test_empty_links_page(self):
        page = LinksResponse.model_validate({})
        assert page.links == []
        assert page.pagination.total == 0


class TestUserProfile:
    def test_partial_profile(self):
        profile = UserProfile.model_validate({"email": "ada@example.com"})
        assert profile.email == "ada@example.com"
        assert profile.is_email_verified is False


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_wire_names_accepted(self):
        assert LinksOptions.model_validate({"sortBy": "tag"}).sort_by.value == "tag"

    def test_trend_period_values(self):
        assert [p.value for p in TrendPeriod] == ["24h", "7d", "30d", "90d", "12m"]

    def test_create_link_requires_url(self):
        with pytest.raises(ValidationError):
            CreateLinkRequest(original_url="")
