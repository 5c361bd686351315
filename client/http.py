"""
Catalog client. One GET per call, bearer token in the header, raw bytes back.

Anything but HTTP 200 is fatal. No retries, no backoff, no refresh.
"""

import logging

import requests

from errors import TransportError, UpstreamStatusError

log = logging.getLogger(__name__)

USER_AGENT = "showsync/0.1"
REQUEST_TIMEOUT = 30


class CatalogClient:
    def __init__(self, access_token: str, session: requests.Session | None = None):
        self._session = session or requests.Session()
        self._session.headers["Authorization"] = f"Bearer {access_token}"
        self._session.headers["User-Agent"] = USER_AGENT

    def fetch(self, url: str) -> bytes:
        """GET a catalog URL and return the response body."""
        try:
            resp = self._session.get(url, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if resp.status_code != 200:
            log.error(f"Catalog API {url}: HTTP {resp.status_code}")
            raise UpstreamStatusError(resp.status_code, url)

        log.debug(f"GET {url}: {len(resp.content)} bytes")
        return resp.content

    def close(self):
        self._session.close()
