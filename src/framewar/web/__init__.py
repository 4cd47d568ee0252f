"""Web frame backend for War."""

from framewar.web.config import ConfigError, WebConfig
from framewar.web.app import create_app

__all__ = [
    "ConfigError",
    "WebConfig",
    "create_app",
]
