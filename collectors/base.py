"""
Base collector interface. All collectors must implement this.
"""

from abc import ABC, abstractmethod
from typing import Protocol


class PageFetcher(Protocol):
    """Anything that turns a URL into a response body. CatalogClient in practice."""

    def fetch(self, url: str) -> bytes:
        ...


class Collector(ABC):
    """
    A collector pulls records from one paginated source.

    Contract:
    - collect() returns everything reachable from the start URL, in order.
    - Collectors never touch storage. The caller decides what to persist.
    - Any fetch or parse error propagates. No partial results.
    """

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    @abstractmethod
    def collect(self) -> list:
        """Fetch every page and return the accumulated records."""
        ...

    @abstractmethod
    def name(self) -> str:
        """Collector name, used for logging."""
        ...
