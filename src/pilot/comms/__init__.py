# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""comms/ package -- wire codec, websocket transport, protocol session."""

from .messages import (
    GameInstance,
    RunCommandData,
    SubGameData,
    decode_game_instance,
    decode_message,
    encode_run_command,
    encode_sub_game,
)
from .session import GameSession, SessionState
from .transport import (
    CloseFrame,
    Frame,
    OtherFrame,
    PingFrame,
    TextFrame,
    Transport,
    WebSocketTransport,
)

__all__ = [
    "CloseFrame",
    "Frame",
    "GameInstance",
    "GameSession",
    "OtherFrame",
    "PingFrame",
    "RunCommandData",
    "SessionState",
    "SubGameData",
    "TextFrame",
    "Transport",
    "WebSocketTransport",
    "decode_game_instance",
    "decode_message",
    "encode_run_command",
    "encode_sub_game",
]
