"""Entry point for the TesteandoMVC web application.

This script serves the FastAPI app with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``testeando_mvc.app.core.config``).  Defaults are
``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from testeando_mvc.app.core.config import settings
from testeando_mvc.app.main import app


async def run_web() -> None:
    """Start the web application using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_web()
    except Exception:
        logging.exception("Exception in web server")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
