# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""noflight-pilot entry point.

Usage:
    noflight-pilot                      # LEVEL_ID and TOKEN from env / .env
    noflight-pilot --level <id>         # override LEVEL_ID
    noflight-pilot --no-browser
    noflight-pilot --list-levels

Startup order: settings -> create game -> show game in browser ->
connect websocket -> subscribe -> run until the server closes.  Any
failure along the way is fatal and exits non-zero.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
import webbrowser

from loguru import logger

from pilot import __version__
from pilot.comms.session import GameSession
from pilot.comms.transport import WebSocketTransport
from pilot.errors import PilotError
from pilot.policies.table import PolicyTable, available_levels

from .backend import GameCreationError, create_game
from .config import ConfigurationError, Settings, load_settings


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="noflight-pilot",
        description="Play a noflight level by answering every tick with heading commands",
    )
    parser.add_argument("--level", help="Level id (overrides LEVEL_ID)")
    parser.add_argument("--no-browser", action="store_true",
                        help="Don't open the game in a browser")
    parser.add_argument("--list-levels", action="store_true",
                        help="List levels with a policy and exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def _show_game(settings: Settings, game_id: str, open_browser: bool) -> None:
    url = settings.game_url(game_id)
    logger.info(f"Game at {url}")
    if open_browser and not webbrowser.open(url):
        logger.warning("Could not open a browser; open the game URL manually")


def play(settings: Settings, open_browser: bool = True) -> dict:
    """Create a game for ``settings.level_id`` and play it to the end."""
    table = PolicyTable(settings.level_id)
    game = create_game(settings)

    _show_game(settings, game.entity_id, open_browser)
    time.sleep(settings.connect_delay)

    transport = WebSocketTransport.connect(settings.websocket_url(), timeout=settings.http_timeout)
    session = GameSession(
        transport,
        game_id=game.entity_id,
        policy_table=table,
        tick_delay=settings.tick_delay,
    )
    try:
        return session.run()
    finally:
        transport.close()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.log_level)

    if args.list_levels:
        for level in available_levels():
            print(f"{level.level_id}  {level.name}")
        return 0

    try:
        settings = load_settings(level_id=args.level)
    except ConfigurationError as exc:
        logger.error(f"Configuration error: {exc}")
        return 2

    try:
        stats = play(settings, open_browser=settings.open_browser and not args.no_browser)
    except GameCreationError as exc:
        logger.error(str(exc))
        return 1
    except PilotError as exc:
        logger.error(f"Session aborted: {exc}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130

    logger.info(f"Done: {stats}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
