# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Settings loaded once at startup from the environment and ``.env``.

Required:
    TOKEN     -- API token for the game server
    LEVEL_ID  -- level to create and play

Everything else has a default.
"""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Required settings are missing or invalid."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token: str
    level_id: str

    frontend_base: str = "noflight.monad.fi"
    backend_base: str = "noflight.monad.fi/backend"

    tick_delay: float = 0.1
    connect_delay: float = 2.0
    http_timeout: float = 10.0
    open_browser: bool = True

    def levels_url(self, level_id: str | None = None) -> str:
        return f"https://{self.backend_base}/api/levels/{level_id or self.level_id}"

    def game_url(self, game_id: str) -> str:
        return f"https://{self.frontend_base}/?id={game_id}"

    def websocket_url(self) -> str:
        return f"wss://{self.backend_base}/{self.token}/"


def load_settings(env_file: str | None = ".env", **overrides) -> Settings:
    """Build ``Settings``; explicit ``overrides`` win over the environment.

    Pass ``env_file=None`` to ignore any ``.env`` file.

    Raises:
        ConfigurationError: naming every missing or invalid variable.
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as exc:
        problems = []
        for err in exc.errors():
            name = ".".join(str(p) for p in err["loc"]).upper()
            if err["type"] == "missing":
                problems.append(f"Env var '{name}' doesn't exist")
            else:
                problems.append(f"Env var '{name}' is invalid: {err['msg']}")
        raise ConfigurationError("; ".join(problems)) from exc
