# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""WorldState — one decoded tick from the game server.

A snapshot is built fresh from every ``game-instance`` frame, never
mutated, and dropped once the policy table has consumed it.  Nothing is
carried from one tick to the next.

Document shape (the nested, string-encoded ``game_state``)::

    {
      "aircrafts": [{"id": "...", "position": {"x": 0, "y": 0}, "direction": 90}],
      "airports":  [{"position": {"x": 0, "y": 0}, "direction": 0}]
    }

Unknown keys are ignored.  Missing or mistyped required keys raise
``SnapshotDecodeError``: values are never coerced, so ``"90"``, ``true``
and ``90.0`` are not headings, and ``NaN`` is not a coordinate.

Ordering of both collections is whatever the server sent.  Several level
policies address aircraft by position ("first", "last", "index 1") and
that order is preserved as-is; the named accessors below exist so the
positional roles read explicitly at call sites.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from pilot.errors import SnapshotDecodeError
from pilot.tactical.heading import normalize_heading


# ---------------------------------------------------------------------------
# Wire document models (validation only)
# ---------------------------------------------------------------------------

# Strict: no string/bool/float coercion into headings, no NaN or inf.
_STRICT = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)


class _PositionDoc(BaseModel):
    model_config = _STRICT

    x: float
    y: float


class _AircraftDoc(BaseModel):
    model_config = _STRICT

    id: str
    position: _PositionDoc
    direction: int


class _AirportDoc(BaseModel):
    model_config = _STRICT

    position: _PositionDoc
    direction: int


class _GameStateDoc(BaseModel):
    model_config = _STRICT

    aircrafts: list[_AircraftDoc]
    airports: list[_AirportDoc]


# ---------------------------------------------------------------------------
# Snapshot types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Position:
    """2D point in level coordinates.  Values may be negative."""

    x: float
    y: float


@dataclass(frozen=True)
class Aircraft:
    """A controlled aircraft.  ``id`` is server-assigned and stable."""

    id: str
    position: Position
    direction: int


@dataclass(frozen=True)
class Airport:
    """A landing target with its required final approach heading."""

    position: Position
    direction: int


@dataclass(frozen=True)
class WorldState:
    """Immutable snapshot of one tick."""

    aircraft: tuple[Aircraft, ...] = ()
    airports: tuple[Airport, ...] = ()

    # --- Construction ---

    @classmethod
    def from_dict(cls, doc: Any) -> WorldState:
        """Build a snapshot from an already-parsed game-state document."""
        try:
            parsed = _GameStateDoc.model_validate(doc)
        except ValidationError as exc:
            raise SnapshotDecodeError(f"Invalid game state: {exc}") from exc

        aircraft = tuple(
            Aircraft(
                id=a.id,
                position=Position(a.position.x, a.position.y),
                direction=normalize_heading(a.direction),
            )
            for a in parsed.aircrafts
        )
        airports = tuple(
            Airport(
                position=Position(p.position.x, p.position.y),
                direction=normalize_heading(p.direction),
            )
            for p in parsed.airports
        )
        return cls(aircraft=aircraft, airports=airports)

    @classmethod
    def from_json(cls, text: str) -> WorldState:
        """Build a snapshot from the string-encoded game-state document."""
        try:
            doc = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise SnapshotDecodeError(f"Game state is not valid JSON: {exc}") from exc
        return cls.from_dict(doc)

    # --- Positional accessors (server order, never sorted) ---

    @property
    def has_traffic(self) -> bool:
        """True when there is at least one aircraft and one airport."""
        return bool(self.aircraft) and bool(self.airports)

    @property
    def first_aircraft(self) -> Aircraft:
        return self.aircraft[0]

    @property
    def second_aircraft(self) -> Aircraft:
        return self.aircraft[1]

    @property
    def last_aircraft(self) -> Aircraft:
        return self.aircraft[-1]

    @property
    def primary_airport(self) -> Airport:
        return self.airports[0]

    def aircraft_at(self, index: int) -> Aircraft:
        """Aircraft at server-order ``index``.  Raises IndexError if absent."""
        return self.aircraft[index]

    def airport_at(self, index: int) -> Airport:
        """Airport at server-order ``index``.  Raises IndexError if absent."""
        return self.airports[index]
