"""
Logging for the web application.

``setup_logging`` attaches the application's own console (and
optionally file) handlers to the root logger and sets the levels of
the root and service loggers.  The handlers carry a fixed name, so a
second call recognises its own work and leaves the configuration as
it is, while handlers installed by someone else (a test runner, an
ASGI server) do not count.

``install_request_logging`` adds an HTTP middleware that logs every
handled request, after routing, at DEBUG level.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "testeando_mvc.console"
FILE_HANDLER_NAME = "testeando_mvc.file"

SERVICES_LOGGER = "testeando_mvc.app.services"
REQUEST_LOGGER = "testeando_mvc.request"


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    value = getattr(logging, name.upper(), None)
    return value if isinstance(value, int) else default


def app_handlers(logger: Optional[logging.Logger] = None):
    """Return the handlers installed by ``setup_logging``."""
    logger = logger or logging.getLogger()
    return [h for h in logger.handlers if h.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)]


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    services_level: Optional[str] = None,
) -> None:
    """Configure the root and service loggers.

    Parameters
    ----------
    level : str
        Root level name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an extra log file.  Resolved relative to the current
        working directory.
    services_level : Optional[str]
        Level for the ``testeando_mvc.app.services`` loggers, e.g.
        ``"WARNING"`` to silence the notification and validation
        trail.  When omitted the services inherit the root level.
    """
    root = logging.getLogger()
    if app_handlers(root):
        return

    root.setLevel(_level(level))
    logging.getLogger(SERVICES_LOGGER).setLevel(_level(services_level, logging.NOTSET))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def install_request_logging(app: FastAPI) -> None:
    """Log ``METHOD path -> status`` for every request at DEBUG level."""
    logger = logging.getLogger(REQUEST_LOGGER)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        response = await call_next(request)
        logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response
