from collectors.base import Collector, PageFetcher
from collectors.episodes import EpisodeCollector, show_url
from collectors.pages import FirstPage, LaterPage, parse_first_page, parse_later_page

__all__ = [
    "Collector",
    "PageFetcher",
    "EpisodeCollector",
    "show_url",
    "FirstPage",
    "LaterPage",
    "parse_first_page",
    "parse_later_page",
]
