# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Game creation over the backend REST API."""

from __future__ import annotations

import requests
from loguru import logger
from pydantic import ValidationError

from pilot.comms.messages import GameInstance

from .config import Settings


class GameCreationError(Exception):
    """The backend refused or failed to create a game."""

    def __init__(self, message: str, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


def create_game(settings: Settings, session: requests.Session | None = None) -> GameInstance:
    """POST a new game for ``settings.level_id``.

    Returns:
        The created game; ``entity_id`` is the game id used for the
        websocket subscription.
    """
    http = session or requests.Session()
    url = settings.levels_url()
    logger.info(f"Creating game for level {settings.level_id}")

    try:
        res = http.post(
            url,
            headers={"Authorization": settings.token},
            timeout=settings.http_timeout,
        )
    except requests.RequestException as exc:
        raise GameCreationError(f"Failed to make post request to server: {exc}") from exc

    if not res.ok:
        raise GameCreationError(
            f"Couldn't create game: {res.status_code} {res.reason} - {res.text}",
            status=res.status_code,
            body=res.text,
        )

    try:
        game = GameInstance.model_validate_json(res.text)
    except ValidationError as exc:
        raise GameCreationError(
            f"Unexpected game creation response: {exc}",
            status=res.status_code,
            body=res.text,
        ) from exc

    logger.info(f"Created game {game.entity_id}")
    return game
