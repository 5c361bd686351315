"""
Page shapes for the show catalog.

The first response is the show resource itself, with the paginated
episode container nested under "episodes". Every later response is the
bare container. Which one applies is decided by position in the loop,
never by looking at the body.
"""

import json
from dataclasses import dataclass, field

from errors import ParseError
from models import Episode, Show


@dataclass
class FirstPage:
    show: Show
    total_count: int
    items: list[Episode] = field(default_factory=list)
    next: str = ""


@dataclass
class LaterPage:
    items: list[Episode] = field(default_factory=list)
    next: str = ""


def _load_object(body: bytes) -> dict:
    try:
        raw = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ParseError(f"Page body is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ParseError(f"Page body is a JSON {type(raw).__name__}, expected object")
    return raw


def _parse_container(container: dict, where: str) -> tuple[list[Episode], str]:
    """Pull items and next link out of a paging container."""
    items = container.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ParseError(f"{where}.items is not a list")

    # null next means last page
    next_url = container.get("next") or ""
    if not isinstance(next_url, str):
        raise ParseError(f"{where}.next is not a string")

    return [Episode.from_dict(i) for i in items], next_url


def parse_first_page(body: bytes) -> FirstPage:
    raw = _load_object(body)
    container = raw.get("episodes")
    if not isinstance(container, dict):
        raise ParseError("First page has no 'episodes' object")

    show = Show.from_dict(raw)
    items, next_url = _parse_container(container, "episodes")
    return FirstPage(
        show=show,
        total_count=show.total_episodes,
        items=items,
        next=next_url,
    )


def parse_later_page(body: bytes) -> LaterPage:
    raw = _load_object(body)
    items, next_url = _parse_container(raw, "page")
    return LaterPage(items=items, next=next_url)
