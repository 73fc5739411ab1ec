"""FastAPI dependency providers for the controller.

Services are resolved per request from objects owned by the
application (``app.state``), which ``create_app`` populates.  Tests
swap them for doubles with ``app.dependency_overrides``::

    app.dependency_overrides[get_simple_service] = lambda: stub
"""

from fastapi import Request

from testeando_mvc.app.services import (
    BaseSimpleService,
    BaseTestDoublesService,
    TestDoublesService,
)


def get_simple_service(request: Request) -> BaseSimpleService:
    """Return the application's shared :class:`SimpleService`."""
    return request.app.state.simple_service


def get_test_doubles_service(request: Request) -> BaseTestDoublesService:
    """Build a :class:`TestDoublesService` over the application's store."""
    return TestDoublesService(request.app.state.store)
