# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Exception hierarchy for the pilot client.

All of these are fatal to the session loop.  Nothing in the core catches
them to retry or to send a best-guess response.
"""

from __future__ import annotations


class PilotError(Exception):
    """Base class for every error raised by the pilot package."""


class ProtocolError(PilotError):
    """An inbound frame could not be understood."""


class MessageDecodeError(ProtocolError):
    """A text frame was not a ``[kind, payload]`` JSON array."""


class SnapshotDecodeError(ProtocolError):
    """A game-state document was malformed or missing required fields."""


class TransportError(PilotError):
    """Sending or receiving on the connection failed."""
