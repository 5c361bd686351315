"""
Configuration. All settings from env vars or a single flat config.json.
Five string fields, nothing else is recognized.
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

# Auto-load .env file so you don't need `export $(grep ...)` every time
from dotenv import load_dotenv
load_dotenv()

from errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"


def _env(name: str, default: str = ""):
    return field(default_factory=lambda: os.environ.get(name, default))


@dataclass
class Config:
    # OAuth2 client credentials. Never logged
    client_id: str = _env("SHOWSYNC_CLIENT_ID")
    client_secret: str = _env("SHOWSYNC_CLIENT_SECRET")
    token_url: str = _env("SHOWSYNC_TOKEN_URL", "https://accounts.spotify.com/api/token")

    # Storage. The table lives in <endpoint>/<region>.db
    region: str = _env("SHOWSYNC_REGION", "local")
    endpoint: str = _env("SHOWSYNC_ENDPOINT", "data")

    @property
    def db_path(self) -> Path:
        return Path(self.endpoint) / f"{self.region}.db"

    def missing_credentials(self) -> list[str]:
        """Names of required fields that are still empty."""
        return [
            name for name in ("client_id", "client_secret", "token_url")
            if not getattr(self, name)
        ]


def load_config(path: Path | None = None) -> Config:
    """
    Build a Config from the environment, then overlay config.json if present.

    The file path comes from the argument, then SHOWSYNC_CONFIG, then
    ./config.json. A missing file is fine; a broken one is not.
    """
    config = Config()

    if path is None:
        path = Path(os.environ.get("SHOWSYNC_CONFIG", DEFAULT_CONFIG_FILE))
    if not path.exists():
        log.debug(f"No config file at {path}, using environment only")
        return config

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    known = {f.name for f in fields(Config)}
    for key, value in raw.items():
        if key not in known:
            log.warning(f"Ignoring unknown config key '{key}' in {path}")
            continue
        if not isinstance(value, str):
            raise ConfigError(f"Config key '{key}' in {path} must be a string")
        setattr(config, key, value)

    return config
