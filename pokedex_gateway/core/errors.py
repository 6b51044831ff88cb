"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Upstream and extraction errors map to 500; configuration errors abort startup
    - No internal details ever reach the HTTP response body (to_log_extra() is for logs only)

Design Decisions:
    - Single hierarchy with GatewayError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    EXTRACTION = "extraction"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    upstream_url: str | None = None
    upstream_status: int | None = None
    record_url: str | None = None
    record_name: str | None = None
    debug_info: dict[str, Any] | None = None


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Flatten code and context into `extra=` fields for the structured logger."""
        extra: dict[str, Any] = {
            "error_code": self.code,
            "error_category": self.category.value,
        }
        for key in ("upstream_url", "upstream_status", "record_url", "record_name"):
            val = getattr(self.context, key)
            if val is not None:
                extra[key] = val
        if self.context.debug_info:
            extra["debug_info"] = self.context.debug_info
        return extra


# ─── Configuration Errors (startup-fatal) ───────────────────────

class InvalidBaseUrlError(GatewayError):
    """Upstream base URL is unusable — process must not start."""
    def __init__(self, base_url: str, reason: str):
        super().__init__(
            f"Invalid upstream base url {base_url!r}: {reason}",
            "INVALID_BASE_URL", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ErrorContext(upstream_url=base_url), 500,
        )
        self.base_url = base_url
        self.reason = reason


# ─── Upstream Errors (per request) ──────────────────────────────

class UpstreamError(GatewayError):
    """Fetching the upstream list page failed."""


class UpstreamTransportError(UpstreamError):
    """DNS, connection, timeout or redirect failure talking to upstream."""
    def __init__(self, url: str, detail: str):
        super().__init__(
            f"Upstream request to {url} failed: {detail}",
            "UPSTREAM_TRANSPORT_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ErrorContext(upstream_url=url), 500,
        )
        self.detail = detail


class UpstreamHttpError(UpstreamError):
    """Upstream answered with a status outside 200-299."""
    def __init__(self, url: str, status_code: int):
        super().__init__(
            f"Upstream returned HTTP {status_code} for {url}",
            "UPSTREAM_HTTP_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR,
            ErrorContext(upstream_url=url, upstream_status=status_code), 500,
        )
        self.status_code = status_code


class UpstreamDecodeError(UpstreamError):
    """Upstream body is not a valid pokemon list page."""
    def __init__(self, url: str, detail: str):
        super().__init__(
            f"Could not decode upstream response from {url}: {detail}",
            "UPSTREAM_DECODE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ErrorContext(upstream_url=url), 500,
        )
        self.detail = detail


# ─── Extraction Errors (per record, fail the whole batch) ───────

class ExtractError(GatewayError):
    """A record's reference url does not end in a numeric id."""
    def __init__(self, message: str, code: str, url: str, name: str | None = None):
        super().__init__(
            message, code, ErrorCategory.EXTRACTION,
            ErrorSeverity.ERROR, ErrorContext(record_url=url, record_name=name), 500,
        )
        self.url = url


class MalformedUrlError(ExtractError):
    def __init__(self, url: str, name: str | None = None):
        super().__init__(
            f"Reference {url!r} is not an absolute url",
            "MALFORMED_URL", url, name,
        )


class NoPathSegmentsError(ExtractError):
    def __init__(self, url: str, name: str | None = None):
        super().__init__(
            f"Reference {url!r} has no hierarchical path",
            "NO_PATH_SEGMENTS", url, name,
        )


class EmptySegmentsError(ExtractError):
    def __init__(self, url: str, name: str | None = None):
        super().__init__(
            f"Reference {url!r} has no path segments",
            "EMPTY_SEGMENTS", url, name,
        )


class NonNumericIdError(ExtractError):
    def __init__(self, url: str, segment: str, name: str | None = None):
        super().__init__(
            f"Reference {url!r} ends in {segment!r}, expected a numeric id",
            "NON_NUMERIC_ID", url, name,
        )
        self.segment = segment
