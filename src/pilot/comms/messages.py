# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Game server wire codec -- tagged ``[kind, payload]`` JSON arrays.

Pure functions, no I/O.  Message shapes::

    -> ["sub-game",      {"id": <game_id>}]
    <- ["game-instance", {"entity_id": <game_id>, "game_state": "<json string>"}]
    -> ["run-command",   {"game_id": <game_id>, "payload": ["HEAD <id> <hdg>", ...]}]
    <- ["success", <any>] / ["failure", <any>]

Encoding is compact (no whitespace between tokens).
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, ValidationError

from pilot.errors import MessageDecodeError
from pilot.policies.base import Command
from pilot.simulation.world import WorldState

# Message kinds
SUB_GAME = "sub-game"
GAME_INSTANCE = "game-instance"
RUN_COMMAND = "run-command"
SUCCESS = "success"
FAILURE = "failure"

_SEPARATORS = (",", ":")


class SubGameData(BaseModel):
    id: str


class GameInstance(BaseModel):
    """A game as returned by game creation and carried by every tick."""

    model_config = ConfigDict(extra="ignore")

    entity_id: str
    game_state: str


class RunCommandData(BaseModel):
    game_id: str
    payload: list[str]


def _encode(kind: str, data: BaseModel) -> str:
    return json.dumps([kind, data.model_dump()], separators=_SEPARATORS)


def encode_sub_game(game_id: str) -> str:
    """Subscribe to tick updates for ``game_id``."""
    return _encode(SUB_GAME, SubGameData(id=game_id))


def encode_run_command(game_id: str, commands: Iterable[Command | str]) -> str:
    """Response to one tick.  ``commands`` may be empty."""
    payload = [c.encode() if isinstance(c, Command) else c for c in commands]
    return _encode(RUN_COMMAND, RunCommandData(game_id=game_id, payload=payload))


def decode_message(text: str) -> tuple[str, Any]:
    """Split an inbound text frame into ``(kind, payload)``.

    Raises:
        MessageDecodeError: not JSON, or not a two-element array whose
            first element is a string.
    """
    try:
        message = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MessageDecodeError(f"Frame is not valid JSON: {exc}") from exc

    if not isinstance(message, list) or len(message) != 2 or not isinstance(message[0], str):
        raise MessageDecodeError(f"Expected [kind, payload], got: {text[:200]!r}")
    return message[0], message[1]


def decode_game_instance(payload: Any) -> tuple[GameInstance, WorldState]:
    """Decode a ``game-instance`` payload and its nested game state.

    Raises:
        MessageDecodeError: the envelope is missing ``entity_id`` or
            ``game_state``.
        SnapshotDecodeError: the nested document is malformed.
    """
    try:
        instance = GameInstance.model_validate(payload)
    except ValidationError as exc:
        raise MessageDecodeError(f"Invalid game-instance payload: {exc}") from exc
    return instance, WorldState.from_json(instance.game_state)
