"""Errors that terminate an analysis run."""


class AnalysisError(Exception):
    """Base class for all analysis errors."""


class ValidationError(AnalysisError):
    """The requested URL is not an absolute http(s) URL."""


class FetchError(AnalysisError):
    """The target page could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url
        self.status_code = status_code


class AnalysisTimeoutError(AnalysisError):
    """The run exceeded its overall wall-clock budget."""
