"""
Token acquisition via the OAuth2 client-credentials grant.

Called once per run. The token is assumed valid for the whole run.
"""

import logging

import requests

from client.http import REQUEST_TIMEOUT, USER_AGENT
from errors import ParseError, TransportError, UpstreamStatusError
from models import TokenResponse

log = logging.getLogger(__name__)


def acquire_token(
    client_id: str,
    client_secret: str,
    token_url: str,
    session: requests.Session | None = None,
) -> TokenResponse:
    """
    Exchange client credentials for a bearer token.

    Credentials go in the form body alongside grant_type.

    Raises:
        TransportError: connection failure.
        UpstreamStatusError: identity provider answered non-200.
        ParseError: body is not JSON or carries no access_token.
    """
    session = session or requests.Session()
    data = {
        "grant_type": "client_credentials",
        "client_id": client_id,
        "client_secret": client_secret,
    }
    headers = {
        "Content-Type": "application/x-www-form-urlencoded",
        "User-Agent": USER_AGENT,
    }

    try:
        resp = session.post(token_url, data=data, headers=headers, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise TransportError(f"Token request to {token_url} failed: {e}") from e

    if resp.status_code != 200:
        log.error(f"Token endpoint {token_url}: HTTP {resp.status_code}")
        raise UpstreamStatusError(resp.status_code, token_url)

    try:
        payload = resp.json()
    except ValueError as e:
        raise ParseError(f"Token response is not JSON: {e}") from e

    token = TokenResponse.from_dict(payload)
    log.info(f"Acquired {token.token_type} token {token.masked()} (expires in {token.expires_in}s)")
    return token
