"""Rate limiting keyed on the client address."""

from __future__ import annotations

from fastapi import Request
from slowapi import Limiter

from framewar.web.config import DEFAULT_RATE_LIMIT

# Rate applied to every frame route, set by create_app()
_rate_limit = DEFAULT_RATE_LIMIT


def get_real_ip(request: Request) -> str:
    """Get real client IP, handling reverse proxy.

    Args:
        request: FastAPI request object

    Returns:
        Client IP address (first in X-Forwarded-For chain if present)
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # X-Forwarded-For: client, proxy1, proxy2
        return forwarded.split(",")[0].strip()
    if request.client is None:
        return "0.0.0.0"
    return request.client.host


def configured_rate_limit() -> str:
    """Rate limit string currently in force, e.g. ``120/minute``."""
    return _rate_limit


def set_rate_limit(rate_limit: str) -> None:
    """Change the rate enforced by ``limiter`` from the next request on."""
    global _rate_limit
    _rate_limit = rate_limit


# Rate limiter using real IP
limiter = Limiter(key_func=get_real_ip, default_limits=[configured_rate_limit])
