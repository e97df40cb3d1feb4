# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Multi-aircraft level policies.

These address aircraft by their server-assigned order.  The roles
("the first aircraft", "the last aircraft", "aircraft i lands on
airport i+1") are part of how each level was solved and must not be
re-sorted.
"""

from __future__ import annotations

from pilot.simulation.world import Aircraft, Airport, WorldState
from pilot.tactical.heading import step_down, step_up

from .base import Command, head

# dont_crash headings for the last aircraft
_ESCAPE_HEADING = 270 + 20 + 20
_TURN_BACK_HEADING = 270 - 20 - 20 - 10
# dont_crash initial heading for the first two aircraft
_PAIR_INIT_HEADING = 280


def multiplane(state: WorldState) -> list[Command]:
    """Same two-phase turn for every aircraft, all landing on one airport."""
    airport = state.primary_airport
    commands: list[Command] = []

    for aircraft in state.aircraft:
        # Initial turn
        if aircraft.position.x >= -50.0 and aircraft.direction < 20:
            commands.append(head(aircraft, step_up(aircraft.direction, 20)))
        # Last turn
        elif (
            aircraft.position.x >= airport.position.x - 15.0
            and aircraft.direction != airport.direction
        ):
            commands.append(head(aircraft, step_up(aircraft.direction, airport.direction)))

    return commands


def criss_cross(state: WorldState) -> list[Command]:
    """Steer the first aircraft across the second's path.

    The second aircraft is only a positional reference: its ``y`` gates
    the middle turn.  It never receives a command.
    """
    if len(state.aircraft) < 2 or len(state.airports) < 2:
        return []

    leader = state.first_aircraft
    reference = state.second_aircraft
    airport = state.airport_at(1)
    pos = leader.position

    # Initial turn
    if pos.x <= -110.0 and leader.direction >= 315:
        return [head(leader, leader.direction - 10)]

    # Middle turn, while still below the reference aircraft
    if pos.y < reference.position.y and pos.x < 50.0 and leader.direction < 325:
        return [head(leader, leader.direction + 20)]

    # Last turn
    if pos.x >= 90.0 and leader.direction != airport.direction:
        return [head(leader, step_down(leader.direction, airport.direction))]

    return []


def _dont_crash_last(aircraft: Aircraft, airport: Airport) -> Command | None:
    """Three-phase escape-and-return for the last aircraft."""
    y = aircraft.position.y

    if y >= 75.0 and aircraft.direction != _ESCAPE_HEADING:
        return head(aircraft, step_up(aircraft.direction, _ESCAPE_HEADING))

    if -11.0 <= y <= 55.0 and aircraft.direction != _TURN_BACK_HEADING:
        return head(aircraft, step_down(aircraft.direction, _TURN_BACK_HEADING))

    if y <= -25.0 and aircraft.direction != airport.direction:
        return head(aircraft, step_up(aircraft.direction, airport.direction))

    return None


def _dont_crash_pair(aircraft: Aircraft, airport: Airport) -> Command | None:
    """Two-phase init-turn / end-turn for aircraft 0 and 1."""
    if aircraft.position.y >= 75.0 and aircraft.direction != _PAIR_INIT_HEADING:
        return head(aircraft, step_up(aircraft.direction, _PAIR_INIT_HEADING))

    if (
        abs(airport.position.y - aircraft.position.y) < 10.0
        and airport.direction != aircraft.direction
    ):
        return head(aircraft, step_down(aircraft.direction, airport.direction))

    return None


def dont_crash(state: WorldState) -> list[Command]:
    """Keep three aircraft apart while routing each to its own airport.

    The last aircraft is handled first and on its own.  With fewer than
    three aircraft nothing else is attempted.  Otherwise aircraft ``i``
    (``i`` in 0, 1) lands on airport ``i + 1``.
    """
    commands: list[Command] = []

    lone = _dont_crash_last(state.last_aircraft, state.primary_airport)
    if lone is not None:
        commands.append(lone)

    if len(state.aircraft) < 3:
        return commands

    for i in (0, 1):
        if i + 1 >= len(state.airports):
            break
        cmd = _dont_crash_pair(state.aircraft_at(i), state.airport_at(i + 1))
        if cmd is not None:
            commands.append(cmd)

    return commands
