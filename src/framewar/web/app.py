"""FastAPI application for the War frame server."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from framewar import __version__
from framewar.game.table import GameTable
from framewar.web.config import WebConfig
from framewar.web.dependencies import get_table, set_table
from framewar.web.routes import frames
from framewar.web.security import limiter, set_rate_limit

logger = logging.getLogger(__name__)


def create_app(config: WebConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = WebConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup: every app deals its own game
        set_table(GameTable(seed=config.seed))
        table = get_table()
        logger.info(
            f"War table ready at {config.base_path or '/'}: "
            f"{len(table.state.player_deck)} vs {len(table.state.computer_deck)} cards"
        )

        yield

        # Shutdown
        logger.info("War table closed")

    app = FastAPI(
        title="War Card Game",
        description="The card game War, played one frame at a time",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.base_path = config.base_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting using real IP. Frame routes carry their own limit
    # decorators; the middleware applies the same rate to /health.
    set_rate_limit(config.rate_limit)
    limiter.reset()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Health check
    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(frames.router, prefix=config.base_path, tags=["frames"])

    return app
