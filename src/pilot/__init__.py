# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Pilot — tick-response control loop for the noflight game server.

This package contains heading arithmetic, the decoded world-state model,
the per-level policy table, and the websocket protocol session that ties
them together.  Process glue (configuration, game creation, CLI) lives in
the ``app`` package.
"""

__version__ = "0.1.0"
