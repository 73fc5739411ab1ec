"""
Service layer abstraction.

Each service is described by an abstract base class and shipped with
one production implementation.  The controller only depends on the
abstract type, so tests can hand it a dummy, stub, fake, mock or spy
instead.
"""

from .simple_service import BaseSimpleService, SimpleService
from .test_doubles_service import BaseTestDoublesService, TestDoublesService

__all__ = [
    "BaseSimpleService",
    "SimpleService",
    "BaseTestDoublesService",
    "TestDoublesService",
]
