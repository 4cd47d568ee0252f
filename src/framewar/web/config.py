"""Environment configuration for the web app."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_BASE_PATH = "/api"
DEFAULT_RATE_LIMIT = "120/minute"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)  # Vite dev server


class ConfigError(ValueError):
    """Invalid configuration value."""

    pass


@dataclass
class WebConfig:
    """Configuration for the frame server."""

    seed: Optional[int] = None
    base_path: str = DEFAULT_BASE_PATH
    rate_limit: str = DEFAULT_RATE_LIMIT
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    def __post_init__(self):
        """Normalize base path to a leading slash and no trailing slash."""
        self.base_path = "/" + self.base_path.strip("/") if self.base_path.strip("/") else ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WebConfig":
        """Build config from FRAMEWAR_* environment variables.

        Raises:
            ConfigError: If FRAMEWAR_SEED is not an integer
        """
        env = os.environ if environ is None else environ

        seed: Optional[int] = None
        raw_seed = env.get("FRAMEWAR_SEED")
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as e:
                raise ConfigError(f"FRAMEWAR_SEED must be an integer, got {raw_seed!r}") from e

        origins = env.get("FRAMEWAR_CORS_ORIGINS")
        cors_origins = (
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins is not None
            else list(DEFAULT_CORS_ORIGINS)
        )

        return cls(
            seed=seed,
            base_path=env.get("FRAMEWAR_BASE_PATH", DEFAULT_BASE_PATH),
            rate_limit=env.get("FRAMEWAR_RATE_LIMIT", DEFAULT_RATE_LIMIT),
            cors_origins=cors_origins,
        )
