# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Duplex text-frame transport over a websocket.

The session only deals in frame *content*.  This module turns raw
websocket frames into four frame kinds:

  - ``TextFrame``  -- a complete (reassembled) text message
  - ``PingFrame``  -- keep-alive; the session answers it with a pong
  - ``CloseFrame`` -- the server is closing the connection
  - ``OtherFrame`` -- binary, pong, anything else

``WebSocketTransport`` reads frames with ``recv_frame()`` rather than
``recv_data_frame()`` so that websocket-client does not answer pings on
its own; answering is the session's job.  TLS and handshake are handled
entirely by websocket-client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

import websocket
from websocket import ABNF, continuous_frame

from pilot.errors import TransportError

logger = logging.getLogger("pilot.transport")


@dataclass(frozen=True)
class TextFrame:
    text: str


@dataclass(frozen=True)
class PingFrame:
    data: bytes = b""


@dataclass(frozen=True)
class CloseFrame:
    code: int | None = None
    reason: str = ""


@dataclass(frozen=True)
class OtherFrame:
    opcode: int
    data: bytes = b""


Frame = Union[TextFrame, PingFrame, CloseFrame, OtherFrame]


@runtime_checkable
class Transport(Protocol):
    """Interface the session needs from a connection."""

    def send_text(self, text: str) -> None:
        """Send one text frame."""
        ...

    def send_pong(self, data: bytes) -> None:
        """Answer a ping with the same payload."""
        ...

    def receive(self) -> Frame:
        """Block until the next frame arrives."""
        ...

    def close(self) -> None:
        """Release the connection."""
        ...


def _parse_close(data: bytes) -> CloseFrame:
    if len(data) < 2:
        return CloseFrame()
    code = int.from_bytes(data[:2], "big")
    return CloseFrame(code=code, reason=data[2:].decode("utf-8", errors="replace"))


class WebSocketTransport:
    """``Transport`` backed by a websocket-client ``WebSocket``."""

    def __init__(self, ws: websocket.WebSocket) -> None:
        self._ws = ws
        self._cont = continuous_frame(False, False)

    @classmethod
    def connect(cls, url: str, timeout: float | None = 10.0) -> WebSocketTransport:
        """Open a websocket to ``url``.

        ``timeout`` bounds the handshake only; reads afterwards block
        indefinitely.
        """
        logger.info(f"Connecting to {_redact(url)}")
        try:
            ws = websocket.create_connection(url, timeout=timeout)
        except (websocket.WebSocketException, OSError) as exc:
            raise TransportError(f"Failed to connect to websocket: {exc}") from exc
        ws.settimeout(None)
        return cls(ws)

    def send_text(self, text: str) -> None:
        try:
            self._ws.send(text)
        except (websocket.WebSocketException, OSError) as exc:
            raise TransportError(f"Send failed: {exc}") from exc

    def send_pong(self, data: bytes) -> None:
        try:
            self._ws.pong(data)
        except (websocket.WebSocketException, OSError) as exc:
            raise TransportError(f"Pong failed: {exc}") from exc

    def receive(self) -> Frame:
        try:
            while True:
                frame = self._ws.recv_frame()
                opcode = frame.opcode

                if opcode in (ABNF.OPCODE_TEXT, ABNF.OPCODE_BINARY, ABNF.OPCODE_CONT):
                    self._cont.validate(frame)
                    self._cont.add(frame)
                    if not self._cont.is_fire(frame):
                        continue
                    opcode, frame = self._cont.extract(frame)
                    data = frame.data
                    if opcode == ABNF.OPCODE_TEXT:
                        if isinstance(data, bytes):
                            data = data.decode("utf-8")
                        return TextFrame(data)
                    return OtherFrame(opcode, _as_bytes(data))

                if opcode == ABNF.OPCODE_PING:
                    return PingFrame(_as_bytes(frame.data))
                if opcode == ABNF.OPCODE_CLOSE:
                    return _parse_close(_as_bytes(frame.data))
                return OtherFrame(opcode, _as_bytes(frame.data))
        except (websocket.WebSocketException, OSError, UnicodeDecodeError) as exc:
            raise TransportError(f"Receive failed: {exc}") from exc

    def close(self) -> None:
        try:
            self._ws.close()
        except (websocket.WebSocketException, OSError) as exc:
            logger.warning(f"Error while closing websocket: {exc}")


def _as_bytes(data: bytes | str | None) -> bytes:
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def _redact(url: str) -> str:
    """Hide the auth token: the last non-empty path segment."""
    scheme, sep, rest = url.partition("://")
    host, slash, path = rest.partition("/")
    if not sep or not slash:
        return url
    segments = path.split("/")
    for i in reversed(range(len(segments))):
        if segments[i]:
            segments[i] = "***"
            break
    return f"{scheme}://{host}/{'/'.join(segments)}"
