"""
Output delivery. stdout only.
"""

from pathlib import Path

from models import Episode, Show, TokenResponse

SEPARATOR = "─" * 60


def _header(title: str):
    print(f"\n{SEPARATOR}")
    print(f"  {title}")
    print(SEPARATOR)


def deliver_token(token: TokenResponse, reveal: bool = False):
    """Print the acquired token. Masked unless reveal is set."""
    _header("ACCESS TOKEN")
    print(f"  type:       {token.token_type}")
    print(f"  expires in: {token.expires_in}s")
    print(f"  token:      {token.access_token if reveal else token.masked()}")
    print(SEPARATOR)


def deliver_show(show: Show, episodes: list[Episode]):
    _header(f"SHOW: {show.name}")
    print(f"  id:        {show.id}")
    print(f"  publisher: {show.publisher}")
    print(f"  episodes:  {show.total_episodes} total, {len(episodes)} on first page")
    print(SEPARATOR)
    for ep in episodes:
        date = ep.release_date or "----------"
        print(f"  {date}  {ep.name}")
    print(SEPARATOR)


def deliver_run(collected: int, written: int, pages: int, db_path: Path, table: str):
    _header("SYNC COMPLETE")
    print(f"  pages fetched:      {pages}")
    print(f"  episodes collected: {collected}")
    print(f"  rows written:       {written}")
    print(f"  table:              {table} ({db_path})")
    print(SEPARATOR)
