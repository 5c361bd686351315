"""
Episode collector. Walks a show's episode pages by following next links.

Stops on whichever comes first:
- a page with no next link
- the running count reaching the show's total_episodes

Both are ordinary endings; the caller only gets the list.
"""

import logging

from collectors.base import Collector, PageFetcher
from collectors.pages import parse_first_page, parse_later_page
from models import Episode, Show

log = logging.getLogger(__name__)

CATALOG_API = "https://api.spotify.com/v1/shows"
DEFAULT_SHOW_ID = "4zqDMbg9WSpC5l81gJCfEc"

STOP_NO_NEXT_FIRST = "no next link on first page"
STOP_NO_NEXT_LATER = "no next link on later page"
STOP_COUNT_REACHED = "count reached"


def show_url(show_id: str = DEFAULT_SHOW_ID) -> str:
    return f"{CATALOG_API}/{show_id}"


class EpisodeCollector(Collector):
    def __init__(self, fetcher: PageFetcher, start_url: str | None = None):
        super().__init__(fetcher)
        self.start_url = start_url or show_url()
        # Filled in by collect(), for logging and the CLI summary
        self.show: Show | None = None
        self.pages_fetched = 0
        self.stop_reason = ""

    def name(self) -> str:
        return "episodes"

    def collect(self) -> list[Episode]:
        total = 0
        seen = 0
        items: list[Episode] = []
        url = self.start_url
        page_index = 0

        while True:
            body = self.fetcher.fetch(url)
            self.pages_fetched = page_index + 1

            if page_index == 0:
                page = parse_first_page(body)
                self.show = page.show
                total = page.total_count
            else:
                page = parse_later_page(body)

            items.extend(page.items)
            seen += len(page.items)
            log.debug(f"Page {page_index}: {len(page.items)} items, {seen}/{total} seen")

            if not page.next:
                self.stop_reason = STOP_NO_NEXT_FIRST if page_index == 0 else STOP_NO_NEXT_LATER
                break
            url = page.next

            if seen == total:
                self.stop_reason = STOP_COUNT_REACHED
                break

            page_index += 1

        if seen != total:
            log.warning(f"Collected {seen} episodes but show reports {total}")
        log.info(
            f"Collected {len(items)} episodes in {self.pages_fetched} pages "
            f"(stopped: {self.stop_reason})"
        )
        return items

    def fetch_show(self) -> tuple[Show, list[Episode]]:
        """Fetch only the first page: the show resource and its first episodes."""
        page = parse_first_page(self.fetcher.fetch(self.start_url))
        self.show = page.show
        self.pages_fetched = 1
        return page.show, page.items
