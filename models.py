"""
Core data types. No network, no storage, just shapes.
"""

from dataclasses import dataclass, field

from errors import ParseError


def _str(raw: dict, key: str) -> str:
    value = raw.get(key)
    return value if isinstance(value, str) else ""


def _int(raw: dict, key: str) -> int:
    value = raw.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Field {key!r} is not a number: {value!r}")
    return int(value)


@dataclass
class TokenResponse:
    """What the identity provider returns for a client-credentials grant."""
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 0     # seconds

    @classmethod
    def from_dict(cls, raw: dict) -> "TokenResponse":
        if not isinstance(raw, dict):
            raise ParseError("Token response is not a JSON object")
        token = raw.get("access_token")
        if not isinstance(token, str) or not token:
            raise ParseError("Token response has no access_token")
        return cls(
            access_token=token,
            token_type=_str(raw, "token_type") or "Bearer",
            expires_in=_int(raw, "expires_in"),
        )

    def masked(self) -> str:
        """Token with everything but the first few characters hidden."""
        return f"{self.access_token[:6]}..." if len(self.access_token) > 6 else "***"


@dataclass(frozen=True)
class Episode:
    """A single episode from the catalog. Only name and description are stored."""
    name: str
    description: str
    id: str = ""
    uri: str = ""
    release_date: str = ""
    duration_ms: int = 0
    language: str = ""
    explicit: bool = False
    external_url: str = ""
    html_description: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "Episode":
        if not isinstance(raw, dict):
            raise ParseError(f"Episode entry is not an object: {raw!r:.80}")
        urls = raw.get("external_urls")
        return cls(
            name=_str(raw, "name"),
            description=_str(raw, "description"),
            id=_str(raw, "id"),
            uri=_str(raw, "uri"),
            release_date=_str(raw, "release_date"),
            duration_ms=_int(raw, "duration_ms"),
            language=_str(raw, "language"),
            explicit=bool(raw.get("explicit", False)),
            external_url=_str(urls, "spotify") if isinstance(urls, dict) else "",
            html_description=_str(raw, "html_description"),
        )

    def __repr__(self) -> str:
        return f"Episode({self.name[:50]!r}, {self.release_date or '?'})"


@dataclass
class Show:
    """Show-level metadata, present only on the first page."""
    id: str
    name: str
    publisher: str = ""
    description: str = ""
    total_episodes: int = 0
    media_type: str = ""
    languages: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> "Show":
        return cls(
            id=_str(raw, "id"),
            name=_str(raw, "name"),
            publisher=_str(raw, "publisher"),
            description=_str(raw, "description"),
            total_episodes=_int(raw, "total_episodes"),
            media_type=_str(raw, "media_type"),
            languages=[l for l in raw.get("languages") or [] if isinstance(l, str)],
        )
