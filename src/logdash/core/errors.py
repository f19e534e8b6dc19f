"""Error taxonomy for the aggregation pipeline.

Fetch errors describe a single endpoint. AggregationFailed is raised
at the join and names the resource whose failure voided the whole
aggregation.
"""

from __future__ import annotations


class LogdashError(Exception):
    """Base class for logdash errors."""


class FetchError(LogdashError):
    """A request for one endpoint did not produce a JSON value."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class NetworkFailure(FetchError):
    """Transport-level failure (connection refused, DNS, timeout)."""


class BadStatus(FetchError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, path: str, status_code: int):
        self.status_code = status_code
        super().__init__(path, f"HTTP {status_code}")


class MalformedPayload(LogdashError):
    """A response body is not valid JSON or does not match its shape."""


class SeriesAlignmentError(MalformedPayload):
    """Two per-day series cannot be combined day for day."""


class AggregationFailed(LogdashError):
    """One resource failed, so no result was produced.

    Attributes:
        resource_key: Key of the failed resource.
        cause: The underlying error.
    """

    def __init__(self, resource_key: str, cause: BaseException):
        self.resource_key = resource_key
        self.cause = cause
        super().__init__(f"{resource_key}: {cause}")
