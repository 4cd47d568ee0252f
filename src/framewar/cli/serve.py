"""CLI command for running the frame server."""

from __future__ import annotations

import logging

import click
import uvicorn

logger = logging.getLogger(__name__)


@click.command()
@click.option("--host", default="127.0.0.1", help="Interface to bind")
@click.option("--port", type=int, default=8000, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(host: str, port: int, reload: bool, verbose: bool):
    """Serve the War frame API.

    Configuration comes from FRAMEWAR_* environment variables.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level)

    logger.info(f"Serving War frames on http://{host}:{port}")
    uvicorn.run(
        "framewar.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if verbose else "info",
    )


if __name__ == "__main__":
    main()
