# baas/cli.py

from __future__ import annotations
from typing import Optional

import typer
import uvicorn
from loguru import logger

from baas.core.config import get_settings
from baas.core.errors import StartupError
from baas.core.logger import setup_logging
from baas.main import open_database

app = typer.Typer(help="Backend Automation Service admin backend")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Listen address (default: HOST)"),
    port: Optional[int] = typer.Option(None, help="Listen port (default: PORT)"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes"),
):
    """Run the HTTP server."""
    settings = get_settings()
    setup_logging(settings)
    if not settings.DATABASE_URL:
        logger.critical("DATABASE_URL environment variable is required")
        raise typer.Exit(code=1)

    host = host or settings.HOST
    port = port or settings.PORT
    logger.info("Server starting on {}:{}", host, port)
    uvicorn.run(
        "baas.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info" if settings.is_release else "debug",
    )


@app.command("init-db")
def init_db():
    """Create the projects and apis tables, then exit."""
    settings = get_settings()
    setup_logging(settings)
    try:
        database = open_database(settings)
    except StartupError:
        raise typer.Exit(code=1)
    database.dispose()
    typer.echo("Tables created")


if __name__ == "__main__":
    app()
