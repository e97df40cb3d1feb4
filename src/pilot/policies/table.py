# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""PolicyTable — maps the configured level id to its policy.

The level id is resolved once, when the table is built, and never read
again from the environment.  An unknown id is not an error: the table
simply produces no commands.

Usage::

    table = PolicyTable("01GH1E14EDA3AK5MQRNP811WME")
    commands = table.generate(state)   # -> [Command(...)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pilot.simulation.world import WorldState

from .base import Command, Policy
from .multi import criss_cross, dont_crash, multiplane
from .single import first_steps, loop_around, turning, wrong_way

logger = logging.getLogger("pilot.policies")


@dataclass(frozen=True)
class Level:
    """A level on the game server and the policy that solves it."""

    level_id: str
    name: str
    policy: Policy


# Level ids as issued by the game server
_LEVELS: tuple[Level, ...] = (
    Level("01GH1E14E88DT3BYWHNYW85ZRV", "First steps", first_steps),
    Level("01GH1E14EDA3AK5MQRNP811WME", "Turning", turning),
    Level("01GH1E14EDD4FRTAGA4P0S80SB", "Loop around", loop_around),
    Level("01GH1E14EEPNDCXVZXAZ6ZKJEC", "Multiplane", multiplane),
    Level("01GH1E14EFSJTVQXP0P49FSZA7", "Criss-cross", criss_cross),
    Level("01GH1E14EFSVXHWHRRSEAJRZ6R", "Wrong way", wrong_way),
    Level("01GH1E14EGT9EGBZ1MEWWB4S7M", "Don't crash", dont_crash),
)

LEVELS: dict[str, Level] = {level.level_id: level for level in _LEVELS}


def available_levels() -> list[Level]:
    """All levels with a policy, in catalogue order."""
    return list(_LEVELS)


class PolicyTable:
    """Dispatches each snapshot to the policy of one fixed level."""

    def __init__(self, level_id: str) -> None:
        self._level_id = level_id
        self._level = LEVELS.get(level_id)
        if self._level is None:
            logger.warning(f"No policy for level {level_id!r}; commands will be empty")

    @property
    def level_id(self) -> str:
        return self._level_id

    @property
    def known(self) -> bool:
        return self._level is not None

    def describe(self) -> str:
        """Human-readable level name, or the raw id if unknown."""
        if self._level is None:
            return f"unknown level {self._level_id}"
        return self._level.name

    def generate(self, state: WorldState) -> list[Command]:
        """Commands for this tick.

        Empty when the snapshot has no aircraft or no airports, or when
        the level is unknown.
        """
        if not state.has_traffic or self._level is None:
            return []
        return self._level.policy(state)


def generate_commands(level_id: str, state: WorldState) -> list[Command]:
    """One-shot convenience: ``PolicyTable(level_id).generate(state)``."""
    return PolicyTable(level_id).generate(state)
