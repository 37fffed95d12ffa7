"""Ingestion error kinds."""

from typing import Optional


class FloodwatchError(Exception):
    """Base class for errors that abort an ingestion pass."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamUnavailableError(FloodwatchError):
    status_code = 502


class UpstreamFetchError(UpstreamUnavailableError):
    """Network failure or non-2xx response from the upstream mirror."""

    def __init__(self, message: str, url: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class DetailUnavailableError(UpstreamUnavailableError):
    """The detail payload of the selected report could not be retrieved."""


class NoEligibleReportError(FloodwatchError):
    """No water level report matched the requested date range."""

    status_code = 404


class MalformedReportError(FloodwatchError):
    """The selected report lacks a usable date or document identifier."""

    status_code = 422
