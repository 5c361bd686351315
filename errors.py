"""
Error types. Every failure in a run is fatal; nothing here is retried.
"""


class ShowSyncError(Exception):
    """Base for all errors that abort a run."""
    pass


class TransportError(ShowSyncError):
    """Network or connection failure talking to an upstream endpoint."""
    pass


class UpstreamStatusError(ShowSyncError):
    """Upstream answered with something other than HTTP 200."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Unexpected status code {status_code} from {url}")


class ParseError(ShowSyncError):
    """Response body does not have the expected shape."""
    pass


class StorageError(ShowSyncError):
    """The episode table could not be dropped, created or written."""
    pass


class ConfigError(ShowSyncError):
    """Configuration file is unreadable or incomplete."""
    pass
