"""
Main entrypoint for TesteandoMVC.

This module assembles the FastAPI application, sets up logging,
creates the objects shared by every request and includes the
controller routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``.
Importing the app here makes it easy to run with uvicorn, e.g.::

    uvicorn testeando_mvc.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from .api.router import router
from .api.routing import ControllerRouteMiddleware
from .core.config import settings
from .core.logging_config import install_request_logging, setup_logging
from .core.store import KeyValueStore
from .services import SimpleService

ERROR_PATH = "/Home/Error"


def create_app(debug: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    debug : Optional[bool]
        Overrides ``settings.debug``.  Outside debug mode unhandled
        exceptions are logged and the client is redirected to the
        error page.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file, settings.services_log_level)

    if debug is None:
        debug = settings.debug

    app = FastAPI(title=settings.project_name, version=settings.app_version, debug=debug)

    # One store per application; it lives as long as the app does.
    app.state.store = KeyValueStore()
    app.state.simple_service = SimpleService()

    app.include_router(router)

    install_request_logging(app)

    if not debug:

        @app.middleware("http")
        async def redirect_unhandled_errors(request: Request, call_next):
            try:
                return await call_next(request)
            except Exception:
                logging.getLogger(__name__).exception(
                    "Unhandled error on %s %s", request.method, request.url.path
                )
                if request.url.path == ERROR_PATH:
                    raise
                return RedirectResponse(ERROR_PATH, status_code=303)

    # Added last so it runs first: later middleware and the router only
    # ever see canonical paths.
    app.add_middleware(ControllerRouteMiddleware)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
