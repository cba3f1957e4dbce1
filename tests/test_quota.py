"""Tests for auth0_sdk.core.quota: quota-limit header parsing."""

from __future__ import annotations

import pytest

from auth0_sdk.core.quota import (
    CLIENT_QUOTA_LIMIT_HEADER,
    ORGANIZATION_QUOTA_LIMIT_HEADER,
    ClientQuotaLimit,
    OrganizationQuotaLimit,
    QuotaLimit,
    extract_header_value,
    get_client_quota_limit,
    get_organization_quota_limit,
    parse_bucket_segment,
    parse_client_limit,
    parse_organization_limit,
    parse_quota_limit,
)

_TWO_BUCKETS = "b=per_hour;q=10;r=9;t=924,b=per_day;q=100;r=99;t=924"

_HEADERS = {
    "Content-Type": ["application/json"],
    "X-Ratelimit-Limit": ["1000"],
    "X-Ratelimit-Remaining": ["500"],
    "X-Ratelimit-Reset": ["1633036800"],
    CLIENT_QUOTA_LIMIT_HEADER: ["b=per_hour;q=2;r=1;t=924,b=per_day;q=20;r=10;t=924"],
    ORGANIZATION_QUOTA_LIMIT_HEADER: ["b=per_hour;q=3;r=2;t=100,b=per_day;q=30;r=20;t=200"],
}


# ---------------------------------------------------------------------------
# Single segment
# ---------------------------------------------------------------------------


class TestParseBucketSegment:
    @pytest.mark.parametrize(
        ("segment", "bucket", "quota", "remaining", "reset_after"),
        [
            ("b=per_hour;q=2;r=1;t=3452", "per_hour", 2, 1, 3452),
            ("b=per_day;q=100;r=99;t=3524", "per_day", 100, 99, 3524),
            ("b=per_hour;q=100;r=50;t=3600;x=extra", "per_hour", 100, 50, 3600),
            ("b=per=hour;q=100;r=50;t=3600", "per=hour", 100, 50, 3600),
            ("t=5;r=0;q=1;b=per_minute", "per_minute", 1, 0, 5),
            ("b=per_day;q=2147483647;r=0;t=0", "per_day", 2147483647, 0, 0),
        ],
    )
    def test_valid_segment(self, segment, bucket, quota, remaining, reset_after):
        parsed = parse_bucket_segment(segment)
        assert parsed is not None
        quota_limit, actual_bucket = parsed
        assert quota_limit == QuotaLimit(quota, remaining, reset_after)
        assert actual_bucket == bucket

    @pytest.mark.parametrize(
        "segment",
        [
            pytest.param("b=per_hour;q=100;r=50", id="missing-field"),
            pytest.param("b=per_hour;b=per_day;q=100;r=50;t=3600", id="duplicate-key"),
            pytest.param("b=per_hour;q=1;r=1;t=1;x=1;x=2", id="duplicate-unknown-key"),
            pytest.param("b=per_hour;;q=100;r=50;t=3600", id="empty-part"),
            pytest.param("b=per_hour;q100;r=50;t=3600", id="no-equals"),
            pytest.param("=per_hour;q=100;r=50;t=3600", id="empty-key"),
            pytest.param("b=;q=100;r=50;t=3600", id="empty-value"),
            pytest.param("b=per_hour;q=abc;r=50;t=3600", id="non-numeric"),
            pytest.param("b=per_hour;q=1.5;r=50;t=3600", id="decimal"),
            pytest.param("b=per_hour;q=-1;r=50;t=3600", id="negative"),
            pytest.param("b=per_hour;q=999999999999999999999;r=50;t=3600", id="overflow"),
            pytest.param("b=per_hour;q=2147483648;r=50;t=3600", id="int32-max-plus-one"),
            pytest.param("b=per_hour;q= 1;r=50;t=3600", id="padded-number"),
            pytest.param("", id="empty"),
        ],
    )
    def test_invalid_segment(self, segment):
        assert parse_bucket_segment(segment) is None


class TestParseQuotaLimit:
    def test_none_input(self):
        assert parse_quota_limit(None) == (None, None)

    def test_empty_input(self):
        assert parse_quota_limit("") == (None, None)

    def test_valid_input(self):
        quota_limit, bucket = parse_quota_limit("b=per_hour;q=2;r=1;t=3452")
        assert quota_limit == QuotaLimit(quota=2, remaining=1, reset_after=3452)
        assert bucket == "per_hour"

    def test_malformed_input(self):
        assert parse_quota_limit("b=per_hour;q=abc;r=1;t=1") == (None, None)

    def test_quota_limit_is_frozen(self):
        quota_limit, _ = parse_quota_limit("b=per_hour;q=2;r=1;t=3452")
        with pytest.raises(AttributeError):
            quota_limit.quota = 0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Multi-bucket header
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("parse", "result_type"),
    [
        (parse_client_limit, ClientQuotaLimit),
        (parse_organization_limit, OrganizationQuotaLimit),
    ],
    ids=["client", "organization"],
)
class TestParseLimitHeader:
    def test_none_header(self, parse, result_type):
        assert parse(None) is None

    def test_empty_header(self, parse, result_type):
        assert parse("") is None

    def test_only_per_hour(self, parse, result_type):
        result = parse("b=per_hour;q=2;r=1;t=924")
        assert isinstance(result, result_type)
        assert result.per_hour == QuotaLimit(2, 1, 924)
        assert result.per_day is None

    def test_only_per_day(self, parse, result_type):
        result = parse("b=per_day;q=2;r=1;t=924")
        assert result.per_day == QuotaLimit(2, 1, 924)
        assert result.per_hour is None

    def test_both_buckets(self, parse, result_type):
        result = parse(_TWO_BUCKETS)
        assert result.per_hour == QuotaLimit(10, 9, 924)
        assert result.per_day == QuotaLimit(100, 99, 924)

    def test_segment_order_does_not_matter(self, parse, result_type):
        reversed_header = ",".join(reversed(_TWO_BUCKETS.split(",")))
        assert parse(reversed_header) == parse(_TWO_BUCKETS)

    def test_unknown_bucket_routes_to_per_day(self, parse, result_type):
        # Intentional: anything that is not per_hour fills the daily slot.
        result = parse("b=per_hour;q=10;r=9;t=924,b=per_minute;q=5;r=4;t=30")
        assert result.per_hour == QuotaLimit(10, 9, 924)
        assert result.per_day == QuotaLimit(5, 4, 30)

    def test_malformed_segment_is_skipped(self, parse, result_type):
        result = parse("b=per_hour;q=10;r=9;t=924,b=per_day;q=oops;r=1;t=1")
        assert result.per_hour == QuotaLimit(10, 9, 924)
        assert result.per_day is None

    def test_malformed_segment_does_not_clear_earlier_bucket(self, parse, result_type):
        result = parse("b=per_day;q=100;r=99;t=924,garbage")
        assert result.per_day == QuotaLimit(100, 99, 924)

    def test_all_segments_malformed_still_returns_object(self, parse, result_type):
        result = parse("garbage,b=per_hour")
        assert result == result_type(per_hour=None, per_day=None)

    def test_last_duplicate_bucket_wins(self, parse, result_type):
        result = parse("b=per_hour;q=1;r=1;t=1,b=per_hour;q=2;r=2;t=2")
        assert result.per_hour == QuotaLimit(2, 2, 2)

    def test_parsing_is_idempotent(self, parse, result_type):
        assert parse(_TWO_BUCKETS) == parse(_TWO_BUCKETS)


# ---------------------------------------------------------------------------
# Header extraction
# ---------------------------------------------------------------------------


class TestExtractHeaderValue:
    def test_present(self):
        assert (
            extract_header_value(_HEADERS, CLIENT_QUOTA_LIMIT_HEADER)
            == "b=per_hour;q=2;r=1;t=924,b=per_day;q=20;r=10;t=924"
        )

    def test_first_value_wins(self):
        headers = {"X-Test": ["first", "second"]}
        assert extract_header_value(headers, "X-Test") == "first"

    def test_none_headers(self):
        assert extract_header_value(None, CLIENT_QUOTA_LIMIT_HEADER) is None

    def test_missing_key(self):
        assert extract_header_value({"Other": ["x"]}, CLIENT_QUOTA_LIMIT_HEADER) is None

    def test_empty_values(self):
        assert extract_header_value({CLIENT_QUOTA_LIMIT_HEADER: []}, CLIENT_QUOTA_LIMIT_HEADER) is None

    def test_lookup_is_case_sensitive(self):
        headers = {CLIENT_QUOTA_LIMIT_HEADER.lower(): ["b=per_hour;q=2;r=1;t=924"]}
        assert extract_header_value(headers, CLIENT_QUOTA_LIMIT_HEADER) is None


class TestGetQuotaLimits:
    def test_client_quota_limit(self):
        result = get_client_quota_limit(_HEADERS)
        assert result == ClientQuotaLimit(
            per_hour=QuotaLimit(2, 1, 924),
            per_day=QuotaLimit(20, 10, 924),
        )

    def test_organization_quota_limit(self):
        result = get_organization_quota_limit(_HEADERS)
        assert result == OrganizationQuotaLimit(
            per_hour=QuotaLimit(3, 2, 100),
            per_day=QuotaLimit(30, 20, 200),
        )

    def test_absent_headers(self):
        assert get_client_quota_limit({"Content-Type": ["application/json"]}) is None
        assert get_organization_quota_limit(None) is None
