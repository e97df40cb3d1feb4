# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Single-aircraft level policies.

Each policy re-derives its phase from the current snapshot only: the
checks are evaluated in order and the first match produces the one
command for that tick.  No tick counter or history is kept.

All of these read ``first_aircraft`` / ``primary_airport`` and assume the
snapshot has traffic; ``PolicyTable`` guarantees that before dispatch.
"""

from __future__ import annotations

from pilot.simulation.world import WorldState
from pilot.tactical.heading import TURN_STEP, heading_delta, step_down, step_up

from .base import Command, head


def first_steps(state: WorldState) -> list[Command]:
    """The tutorial level flies itself."""
    return []


def turning(state: WorldState) -> list[Command]:
    """Turn in toward 45, then align with the runway near the field."""
    aircraft = state.first_aircraft
    airport = state.primary_airport

    # Initial turn toward the airport
    if aircraft.direction > 50:
        return [head(aircraft, step_down(aircraft.direction, 45))]

    # Final alignment, decrease-only step
    if (
        aircraft.position.y >= airport.position.y - 8.0
        and aircraft.direction != airport.direction
    ):
        return [head(aircraft, step_down(aircraft.direction, airport.direction))]

    return []


def loop_around(state: WorldState) -> list[Command]:
    """Swing out past the field, straighten on 180, then land."""
    aircraft = state.first_aircraft
    airport = state.primary_airport
    x = aircraft.position.x

    # Initial turn
    if x >= 40.0 and aircraft.direction < 198:
        return [head(aircraft, step_up(aircraft.direction, 198))]

    # Straighten
    if 8.0 <= x <= 20.0 and aircraft.direction != 180:
        return [head(aircraft, 180)]

    # Final alignment
    if x <= airport.position.x + 5.0 and aircraft.direction != airport.direction:
        return [head(aircraft, step_down(aircraft.direction, airport.direction))]

    return []


def wrong_way(state: WorldState) -> list[Command]:
    """Turn a departing aircraft around and bring it onto the runway heading."""
    aircraft = state.first_aircraft
    airport = state.primary_airport
    pos = aircraft.position

    # Initial turn
    if pos.y < 10.0 and pos.x < 5.0:
        return [head(aircraft, step_up(aircraft.direction, 85))]

    # Second turn, snapping to the runway once within one step of it
    if (pos.y >= 29.0 or aircraft.direction > 180) and aircraft.direction != airport.direction:
        if heading_delta(airport.direction, aircraft.direction) <= TURN_STEP:
            return [head(aircraft, airport.direction)]
        return [head(aircraft, aircraft.direction - TURN_STEP)]

    return []
