# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""GameSession — the tick-response protocol loop.

States::

    CONNECTING --subscribe()--> SUBSCRIBED --game-instance--> PROCESSING
                                    ^                              |
                                    +------- run-command sent -----+
    any --close frame--> CLOSED

Frames are handled strictly one at a time in arrival order:

  - ping           -> pong with the same payload, immediately
  - close          -> CLOSED, loop ends, nothing more is sent
  - game-instance  -> decode, run policy, pause ``tick_delay``, send run-command
  - success/failure-> logged
  - anything else  -> logged and ignored

The ``tick_delay`` pause is a deliberate blocking pacing contract: it
sits between policy evaluation and the send, and holds off reading the
next frame.  The server is expected to tick no faster than that.

Decode errors and transport errors propagate out of ``run()``.  There
is no retry and no best-guess response.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable

from pilot.policies.table import PolicyTable

from .messages import (
    FAILURE,
    GAME_INSTANCE,
    SUCCESS,
    decode_game_instance,
    decode_message,
    encode_run_command,
    encode_sub_game,
)
from .transport import CloseFrame, Frame, PingFrame, TextFrame, Transport

logger = logging.getLogger("pilot.session")

# Pause between computing a tick's commands and sending them (seconds)
DEFAULT_TICK_DELAY = 0.1


class SessionState(Enum):
    CONNECTING = "connecting"
    SUBSCRIBED = "subscribed"
    PROCESSING = "processing"
    CLOSED = "closed"


class GameSession:
    """Drives one game over an open transport until the server closes it."""

    def __init__(
        self,
        transport: Transport,
        game_id: str,
        policy_table: PolicyTable,
        tick_delay: float = DEFAULT_TICK_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._transport = transport
        self._game_id = game_id
        self._policies = policy_table
        self._tick_delay = tick_delay
        self._sleep = sleep

        self._state = SessionState.CONNECTING

        # Stats
        self._ticks: int = 0
        self._commands_sent: int = 0
        self._pings: int = 0
        self._unhandled: int = 0
        self._failures: int = 0

    # -----------------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def game_id(self) -> str:
        return self._game_id

    @property
    def closed(self) -> bool:
        return self._state is SessionState.CLOSED

    @property
    def stats(self) -> dict:
        return {
            "state": self._state.value,
            "game_id": self._game_id,
            "level": self._policies.describe(),
            "ticks": self._ticks,
            "commands_sent": self._commands_sent,
            "pings_answered": self._pings,
            "failures": self._failures,
            "unhandled": self._unhandled,
        }

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def subscribe(self) -> None:
        """Ask the server for tick updates on our game."""
        if self._state is not SessionState.CONNECTING:
            raise RuntimeError(f"Cannot subscribe in state {self._state.value}")
        self._transport.send_text(encode_sub_game(self._game_id))
        self._state = SessionState.SUBSCRIBED
        logger.info(f"Subscribed to game {self._game_id} ({self._policies.describe()})")

    def run(self) -> dict:
        """Subscribe if needed, then handle frames until the server closes.

        Returns:
            Final ``stats``.
        """
        if self._state is SessionState.CONNECTING:
            self.subscribe()
        while not self.closed:
            self.handle_frame(self._transport.receive())
        logger.info(
            f"Session ended after {self._ticks} ticks, "
            f"{self._commands_sent} commands sent"
        )
        return self.stats

    # -----------------------------------------------------------------------
    # Frame dispatch
    # -----------------------------------------------------------------------

    def handle_frame(self, frame: Frame) -> bool:
        """Process one inbound frame.  Returns False once the session is closed."""
        if self.closed:
            return False

        if isinstance(frame, PingFrame):
            self._transport.send_pong(frame.data)
            self._pings += 1
        elif isinstance(frame, CloseFrame):
            self._state = SessionState.CLOSED
            logger.info(f"CLOSED (code={frame.code}, reason={frame.reason!r})")
        elif isinstance(frame, TextFrame):
            self._handle_text(frame.text)
        else:
            self._unhandled += 1
            logger.warning(f"Unhandled frame type: {frame!r}")

        return not self.closed

    def _handle_text(self, text: str) -> None:
        kind, payload = decode_message(text)

        if kind == GAME_INSTANCE:
            self._handle_game_instance(payload)
        elif kind == SUCCESS:
            logger.info(f"success: {_short(payload)}")
        elif kind == FAILURE:
            self._failures += 1
            logger.warning(f"failure: {_short(payload)}")
        else:
            self._unhandled += 1
            logger.warning(f"Unhandled message: {kind} {_short(payload)}")

    def _handle_game_instance(self, payload: Any) -> None:
        self._state = SessionState.PROCESSING
        instance, world = decode_game_instance(payload)
        if instance.entity_id != self._game_id:
            logger.debug(f"Tick for game {instance.entity_id}, subscribed to {self._game_id}")

        commands = self._policies.generate(world)

        self._sleep(self._tick_delay)
        self._transport.send_text(encode_run_command(instance.entity_id, commands))

        self._ticks += 1
        self._commands_sent += len(commands)
        self._state = SessionState.SUBSCRIBED
        if commands:
            logger.debug(f"Tick {self._ticks}: {', '.join(c.encode() for c in commands)}")


def _short(payload: Any, limit: int = 200) -> str:
    text = str(payload)
    return text if len(text) <= limit else text[:limit] + "..."
