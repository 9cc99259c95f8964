"""Error taxonomy for the scrape pipeline.

Every failure the pipeline can report is a :class:`ScraperError` carrying a
``category`` token (the wire-level ``error`` field) and the HTTP status the
API answers with.  Transport, status, content-type and parse failures all
collapse into :class:`ScrapeFailedError`; the message keeps the sub-cause.
"""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for all classified pipeline failures."""

    category: str = "scrape_failed"
    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingURLError(ScraperError):
    category = "missing_url"
    http_status = 400

    def __init__(self, message: str = "URL parameter is required") -> None:
        super().__init__(message)


class InvalidURLError(ScraperError):
    category = "invalid_url"
    http_status = 400

    def __init__(self, message: str = "URL must be a valid http or https URL") -> None:
        super().__init__(message)


class MethodNotAllowedError(ScraperError):
    category = "method_not_allowed"
    http_status = 405

    def __init__(self, message: str = "Only GET method is allowed") -> None:
        super().__init__(message)


class ScrapeFailedError(ScraperError):
    """The page could not be fetched or parsed.

    Attributes:
        status_code: Final HTTP status when the failure was a non-2xx answer.
        protection: Anti-bot service label detected on a blocked response.
    """

    category = "scrape_failed"
    http_status = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        protection: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.protection = protection


class FetchTimeoutError(ScrapeFailedError):
    """The request did not complete within its time budget."""
