#!/usr/bin/env python3
"""
showsync: mirror a podcast show's episodes into a local key-value table.

Usage:
    python main.py                  # same as `run`
    python main.py run              # token -> all episode pages -> rebuild table
    python main.py token            # acquire and print an access token
    python main.py show             # fetch the show resource and print a summary
    python main.py stats            # show row count of the episode table

Settings come from SHOWSYNC_* env vars, .env, or config.json.
"""

import argparse
import logging
import sys

from client import CatalogClient, acquire_token
from collectors import EpisodeCollector
from config import Config, load_config
from delivery import deliver_run, deliver_show, deliver_token
from errors import ConfigError, ShowSyncError
from models import TokenResponse
from storage import EpisodeTable

log = logging.getLogger("showsync")


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _token(config: Config) -> TokenResponse:
    missing = config.missing_credentials()
    if missing:
        raise ConfigError(
            f"Missing settings: {', '.join(missing)}. "
            f"Set SHOWSYNC_CLIENT_ID / SHOWSYNC_CLIENT_SECRET or add them to config.json."
        )
    return acquire_token(config.client_id, config.client_secret, config.token_url)


def cmd_token(config: Config, reveal: bool = False):
    """Acquire a token and print it."""
    deliver_token(_token(config), reveal=reveal)


def cmd_show(config: Config):
    """Fetch the first page only and print the show."""
    client = CatalogClient(_token(config).access_token)
    try:
        show, episodes = EpisodeCollector(client).fetch_show()
    finally:
        client.close()
    deliver_show(show, episodes)


def cmd_run(config: Config) -> int:
    """Full pipeline. The table is only touched once every page is in."""
    client = CatalogClient(_token(config).access_token)
    collector = EpisodeCollector(client)
    try:
        episodes = collector.collect()
    finally:
        client.close()

    table = EpisodeTable(config.db_path)
    try:
        written = table.replace_all(episodes)
    finally:
        table.close()

    deliver_run(
        collected=len(episodes),
        written=written,
        pages=collector.pages_fetched,
        db_path=config.db_path,
        table=table.table_name,
    )
    return written


def cmd_stats(config: Config):
    """Print row count of the episode table."""
    table = EpisodeTable(config.db_path)
    try:
        print(f"{table.table_name} ({config.db_path}): {table.count()} rows")
    finally:
        table.close()


def cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="showsync",
        description="Mirror a podcast show's episodes into a key-value table",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command", help="Command to run (default: run)")

    sub.add_parser("run", parents=[common], help="Collect all episodes and rebuild the table")
    token_parser = sub.add_parser("token", parents=[common], help="Acquire and print an access token")
    token_parser.add_argument(
        "--reveal", action="store_true",
        help="Print the full token instead of a masked prefix",
    )
    sub.add_parser("show", parents=[common], help="Fetch the show resource only")
    sub.add_parser("stats", parents=[common], help="Show episode table row count")

    args = parser.parse_args(argv)
    command = args.command or "run"

    setup_logging(getattr(args, "verbose", False))

    try:
        config = load_config()
        match command:
            case "run":
                cmd_run(config)
            case "token":
                cmd_token(config, reveal=args.reveal)
            case "show":
                cmd_show(config)
            case "stats":
                cmd_stats(config)
    except ShowSyncError as e:
        log.error(f"{command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(cli())
