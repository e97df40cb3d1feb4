# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Root conftest — shared snapshot builders."""

import pytest

from pilot.simulation.world import Aircraft, Airport, Position, WorldState


def _aircraft(id="a1", x=0.0, y=0.0, direction=0):
    return Aircraft(id=id, position=Position(x, y), direction=direction)


def _airport(x=0.0, y=0.0, direction=0):
    return Airport(position=Position(x, y), direction=direction)


@pytest.fixture
def aircraft():
    """Factory: aircraft(id, x, y, direction)."""
    return _aircraft


@pytest.fixture
def airport():
    """Factory: airport(x, y, direction)."""
    return _airport


@pytest.fixture
def world():
    """Factory: world(aircraft_list, airport_list) -> WorldState."""
    def _build(aircraft=(), airports=()):
        return WorldState(aircraft=tuple(aircraft), airports=tuple(airports))
    return _build


@pytest.fixture
def game_state_doc():
    """A well-formed nested game-state document (as a dict)."""
    return {
        "bbox": [{"x": -200, "y": -200}, {"x": 200, "y": 200}],
        "aircrafts": [
            {
                "id": "plane-1",
                "name": "ABC123",
                "position": {"x": -20.5, "y": 50.0},
                "direction": 60,
                "speed": 5,
                "collisionRadius": 10,
                "destination": "airport-1",
            },
        ],
        "airports": [
            {"id": "airport-1", "position": {"x": 0, "y": 100}, "direction": 0},
        ],
    }
