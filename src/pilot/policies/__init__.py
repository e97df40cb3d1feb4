# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""policies/ package -- per-level command generation.

Re-exports PolicyTable as the primary entry point.
"""

from .base import Command, Policy
from .multi import criss_cross, dont_crash, multiplane
from .single import first_steps, loop_around, turning, wrong_way
from .table import LEVELS, Level, PolicyTable, available_levels, generate_commands

__all__ = [
    "Command",
    "Level",
    "LEVELS",
    "Policy",
    "PolicyTable",
    "available_levels",
    "criss_cross",
    "dont_crash",
    "first_steps",
    "generate_commands",
    "loop_around",
    "multiplane",
    "turning",
    "wrong_way",
]
