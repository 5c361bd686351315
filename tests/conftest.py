import json
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# ──────────────────────────────────────────────
# Fakes standing in for the network
# ──────────────────────────────────────────────

class FakeResponse:
    def __init__(self, status_code=200, json_data=None, content=None):
        self.status_code = status_code
        if content is None:
            content = json.dumps(json_data if json_data is not None else {}).encode()
        self.content = content

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """Hands out queued responses (or raises queued exceptions) in order."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.headers = {}
        self.calls = []
        self.closed = False

    def _next(self):
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self._next()

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self._next()

    def close(self):
        self.closed = True


class FakeFetcher:
    """PageFetcher keyed by URL. Records every URL fetched."""

    def __init__(self, pages):
        self.pages = pages
        self.fetched = []

    def fetch(self, url):
        self.fetched.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        if isinstance(page, bytes):
            return page
        return json.dumps(page).encode()


def make_episode(name, description=None, **extra):
    raw = {
        "id": name.lower().replace(" ", "-"),
        "name": name,
        "description": description if description is not None else f"About {name}",
        "release_date": "2024-01-01",
        "duration_ms": 1_800_000,
        "external_urls": {"spotify": f"https://open.spotify.com/episode/{name}"},
    }
    raw.update(extra)
    return raw


def make_first_page(items, total, next_url=None, **show):
    page = {
        "id": "show-1",
        "name": "Test Show",
        "publisher": "Test Publisher",
        "description": "A show for tests",
        "total_episodes": total,
        "media_type": "audio",
        "languages": ["ja"],
        "episodes": {
            "href": "https://api.example.com/shows/show-1/episodes",
            "items": items,
            "limit": 50,
            "next": next_url,
            "offset": 0,
            "previous": None,
            "total": total,
        },
    }
    page.update(show)
    return page


def make_later_page(items, next_url=None, offset=50, total=0):
    return {
        "href": "https://api.example.com/shows/show-1/episodes",
        "items": items,
        "limit": 50,
        "next": next_url,
        "offset": offset,
        "previous": "https://api.example.com/shows/show-1/episodes?offset=0",
        "total": total,
    }


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No SHOWSYNC_* vars and a working directory without config.json."""
    for var in (
        "SHOWSYNC_CLIENT_ID",
        "SHOWSYNC_CLIENT_SECRET",
        "SHOWSYNC_TOKEN_URL",
        "SHOWSYNC_REGION",
        "SHOWSYNC_ENDPOINT",
        "SHOWSYNC_CONFIG",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
