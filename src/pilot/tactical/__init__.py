# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Tactical helpers — pure heading arithmetic."""

from .heading import (
    TURN_STEP,
    heading_delta,
    normalize_heading,
    step_down,
    step_toward,
    step_up,
)

__all__ = [
    "TURN_STEP",
    "heading_delta",
    "normalize_heading",
    "step_down",
    "step_toward",
    "step_up",
]
