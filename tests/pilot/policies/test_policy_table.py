"""Tests for PolicyTable dispatch and the shared policy contract."""

from __future__ import annotations

import pytest

from pilot.policies import (
    LEVELS,
    Command,
    PolicyTable,
    available_levels,
    generate_commands,
)
from pilot.simulation.world import WorldState


pytestmark = pytest.mark.unit

TURNING = "01GH1E14EDA3AK5MQRNP811WME"
DONT_CRASH = "01GH1E14EGT9EGBZ1MEWWB4S7M"


@pytest.fixture
def busy_state(world, aircraft, airport):
    """Three aircraft, three airports, every policy has something to say."""
    return world(
        [
            aircraft("a", x=60, y=80, direction=90),
            aircraft("b", x=-120, y=45, direction=330),
            aircraft("c", x=0, y=80, direction=270),
        ],
        [
            airport(x=0, y=100, direction=0),
            airport(x=120, y=0, direction=270),
            airport(x=-100, y=40, direction=270),
        ],
    )


class TestCatalogue:

    def test_seven_levels(self):
        assert len(available_levels()) == 7
        assert set(LEVELS) == {level.level_id for level in available_levels()}

    def test_level_names(self):
        names = [level.name for level in available_levels()]
        assert names[0] == "First steps"
        assert names[-1] == "Don't crash"


class TestDispatch:

    def test_known_level(self):
        table = PolicyTable(TURNING)
        assert table.known
        assert table.level_id == TURNING
        assert table.describe() == "Turning"

    def test_unknown_level_yields_nothing(self, busy_state):
        table = PolicyTable("no-such-level")
        assert not table.known
        assert "unknown" in table.describe()
        assert table.generate(busy_state) == []

    def test_turning_scenario(self, world, aircraft, airport):
        state = world([aircraft("p1", y=50, direction=60)], [airport(y=100, direction=0)])
        assert PolicyTable(TURNING).generate(state) == [Command("p1", 45)]
        assert [c.encode() for c in PolicyTable(TURNING).generate(state)] == ["HEAD p1 45"]

    def test_generate_commands_shortcut(self, busy_state):
        assert generate_commands(DONT_CRASH, busy_state) == PolicyTable(DONT_CRASH).generate(busy_state)


class TestPolicyContract:
    """Properties every level policy must satisfy."""

    @pytest.mark.parametrize("level_id", sorted(LEVELS))
    def test_empty_aircraft_yields_nothing(self, level_id, world, airport):
        assert PolicyTable(level_id).generate(world([], [airport()])) == []

    @pytest.mark.parametrize("level_id", sorted(LEVELS))
    def test_empty_airports_yields_nothing(self, level_id, world, aircraft):
        assert PolicyTable(level_id).generate(world([aircraft()], [])) == []

    @pytest.mark.parametrize("level_id", sorted(LEVELS))
    def test_empty_snapshot_yields_nothing(self, level_id):
        assert PolicyTable(level_id).generate(WorldState()) == []

    @pytest.mark.parametrize("level_id", sorted(LEVELS))
    def test_deterministic_and_one_command_per_aircraft(self, level_id, busy_state):
        table = PolicyTable(level_id)
        first = table.generate(busy_state)
        second = table.generate(busy_state)
        assert first == second
        ids = [c.aircraft_id for c in first]
        assert len(ids) == len(set(ids))
        assert all(0 <= c.heading <= 359 for c in first)

    @pytest.mark.parametrize("level_id", sorted(LEVELS))
    def test_sweep_stays_in_range(self, level_id, world, aircraft, airport):
        table = PolicyTable(level_id)
        airports = [airport(0, 0, 0), airport(50, 50, 90), airport(-50, 40, 270)]
        for x in (-150, -50, 0, 15, 45, 95):
            for y in (-30, 0, 30, 80):
                for d in (0, 45, 100, 200, 320, 359):
                    state = world(
                        [aircraft("a", x, y, d), aircraft("b", -x, -y, d), aircraft("c", y, x, d)],
                        airports,
                    )
                    commands = table.generate(state)
                    assert all(0 <= c.heading <= 359 for c in commands)
                    assert len({c.aircraft_id for c in commands}) == len(commands)


class TestCommand:

    def test_encode(self):
        assert Command("abc", 7).encode() == "HEAD abc 7"
        assert str(Command("abc", 7)) == "HEAD abc 7"
