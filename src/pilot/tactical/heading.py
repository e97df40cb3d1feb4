# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Heading arithmetic — normalizing and clamping integer compass headings.

Headings are integer degrees.  Every heading exposed by the world model
or sent in a command lies in [0, 359].

Operations used by the policy table:

  - ``normalize_heading()`` -- wrap any integer into [0, 359].
  - ``step_toward()`` -- move toward a target by at most one turn step,
    picking the direction numerically (no wraparound shortcut).
  - ``step_up()`` / ``step_down()`` -- the one-directional clamps the
    level policies were authored with.  They never step past the target;
    when the target lies the "wrong" way they jump straight to it.
"""

from __future__ import annotations

# Maximum heading change a policy issues in a single tick (degrees)
TURN_STEP = 20


def normalize_heading(heading: int) -> int:
    """Wrap a heading into [0, 359].

    Python's ``%`` floors toward negative infinity, so negative inputs
    land in range too (``-20 -> 340``).
    """
    return (heading + 360) % 360


def heading_delta(a: int, b: int) -> int:
    """Absolute numeric difference between two headings (no wraparound)."""
    return abs(a - b)


def step_up(current: int, target: int, max_step: int = TURN_STEP) -> int:
    """Increase ``current`` by ``max_step``, capped at ``target``."""
    return normalize_heading(min(current + max_step, target))


def step_down(current: int, target: int, max_step: int = TURN_STEP) -> int:
    """Decrease ``current`` by ``max_step``, floored at ``target``.

    When ``target`` is above ``current`` the floor wins and the result
    jumps straight to ``target``.
    """
    return normalize_heading(max(current - max_step, target))


def step_toward(current: int, target: int, max_step: int = TURN_STEP) -> int:
    """Advance ``current`` toward ``target`` by at most ``max_step`` degrees.

    Direction is chosen by numeric comparison.  Never overshoots; returns
    ``target`` (normalized) once it is within ``max_step`` or already equal.

    Args:
        current: Current heading in degrees.
        target: Desired heading in degrees.
        max_step: Largest change allowed this tick (must be >= 0).

    Returns:
        The new heading in [0, 359].
    """
    if max_step < 0:
        raise ValueError(f"max_step must be non-negative, got {max_step}")
    if current < target:
        return step_up(current, target, max_step)
    if current > target:
        return step_down(current, target, max_step)
    return normalize_heading(target)
