# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""simulation/ package -- the decoded per-tick world state.

Re-exports the snapshot types; see ``world`` for decoding.
"""

from .world import Aircraft, Airport, Position, WorldState

__all__ = ["Aircraft", "Airport", "Position", "WorldState"]
