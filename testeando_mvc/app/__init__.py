"""
Application package initializer.

The project follows a small MVC layout: services in ``services`` hold
the (deliberately trivial) business logic, ``api/endpoints`` holds the
controller that maps routes to view models, ``schemas`` defines those
view models and ``views`` turns them into HTML.  Shared plumbing such
as configuration, logging and the key/value store lives in ``core``.
"""

from .main import app  # noqa: F401
