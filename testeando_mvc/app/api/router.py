"""
Top‑level router.

Aggregates the controller routers.  The ``Home`` controller serves the
landing page at ``/`` as well as its actions under ``/Home``, so it is
included without a prefix and declares its own paths.
"""

from fastapi import APIRouter

from .endpoints import home

router = APIRouter()

router.include_router(home.router, tags=["home"])
