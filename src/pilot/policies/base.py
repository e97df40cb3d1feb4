# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Shared types for level policies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pilot.simulation.world import Aircraft, WorldState
from pilot.tactical.heading import normalize_heading

_VERB = "HEAD"


@dataclass(frozen=True)
class Command:
    """Instruction to set one aircraft's target heading."""

    aircraft_id: str
    heading: int

    def encode(self) -> str:
        """Render as ``HEAD <id> <heading>``."""
        return f"{_VERB} {self.aircraft_id} {self.heading}"

    def __str__(self) -> str:
        return self.encode()


# A policy maps one tick's snapshot to the commands to send this tick.
Policy = Callable[[WorldState], list[Command]]


def head(aircraft: Aircraft, heading: int) -> Command:
    """Command ``aircraft`` onto ``heading`` (normalized)."""
    return Command(aircraft_id=aircraft.id, heading=normalize_heading(heading))
