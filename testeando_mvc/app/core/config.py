"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application can be started without any configuration at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "TesteandoMVC")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # In debug mode unhandled exceptions are not turned into a redirect
    # to the error page, so the traceback reaches the developer.
    debug: bool = _env_flag("DEBUG")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    # Level of the service loggers; unset means "same as LOG_LEVEL".
    services_log_level: Optional[str] = os.getenv("SERVICES_LOG_LEVEL") or None

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module.
settings = Settings()
