"""Error hierarchy tests — codes, categories and log extras.

Tests:
    - Upstream and extraction errors share their intermediate base classes
    - Every per-request error maps to HTTP 500
    - to_log_extra() only surfaces populated context fields
"""

import pytest

from pokedex_gateway.core.errors import (
    EmptySegmentsError,
    ErrorCategory,
    ErrorSeverity,
    ExtractError,
    GatewayError,
    InvalidBaseUrlError,
    MalformedUrlError,
    NoPathSegmentsError,
    NonNumericIdError,
    UpstreamDecodeError,
    UpstreamError,
    UpstreamHttpError,
    UpstreamTransportError,
)


@pytest.mark.parametrize("exc, code", [
    (UpstreamTransportError("https://x/pokemon", "ConnectError: refused"), "UPSTREAM_TRANSPORT_ERROR"),
    (UpstreamHttpError("https://x/pokemon", 404), "UPSTREAM_HTTP_ERROR"),
    (UpstreamDecodeError("https://x/pokemon", "1 validation error(s)"), "UPSTREAM_DECODE_ERROR"),
])
def test_upstream_errors(exc, code):
    assert isinstance(exc, UpstreamError)
    assert exc.code == code
    assert exc.category == ErrorCategory.EXTERNAL_API
    assert exc.http_status == 500


@pytest.mark.parametrize("exc, code", [
    (MalformedUrlError("not a url"), "MALFORMED_URL"),
    (NoPathSegmentsError("mailto:a@b"), "NO_PATH_SEGMENTS"),
    (EmptySegmentsError("https://x/"), "EMPTY_SEGMENTS"),
    (NonNumericIdError("https://x/abc", "abc"), "NON_NUMERIC_ID"),
])
def test_extract_errors(exc, code):
    assert isinstance(exc, ExtractError)
    assert not isinstance(exc, UpstreamError)
    assert exc.code == code
    assert exc.category == ErrorCategory.EXTRACTION
    assert exc.http_status == 500


def test_invalid_base_url_is_critical_config_error():
    exc = InvalidBaseUrlError("ftp://example.com/", "scheme must be http or https")
    assert isinstance(exc, GatewayError)
    assert exc.category == ErrorCategory.CONFIGURATION
    assert exc.severity == ErrorSeverity.CRITICAL
    assert "ftp://example.com/" in str(exc)


def test_http_error_log_extra_includes_status():
    extra = UpstreamHttpError("https://x/pokemon?limit=20&offset=0", 503).to_log_extra()
    assert extra == {
        "error_code": "UPSTREAM_HTTP_ERROR",
        "error_category": "external_api",
        "upstream_url": "https://x/pokemon?limit=20&offset=0",
        "upstream_status": 503,
    }


def test_extract_error_log_extra_names_record():
    extra = NonNumericIdError("https://x/abc", "abc", name="missingno").to_log_extra()
    assert extra["record_url"] == "https://x/abc"
    assert extra["record_name"] == "missingno"
    assert "upstream_status" not in extra
