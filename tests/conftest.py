"""Shared test fixtures."""
from decimal import Decimal
from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from testeando_mvc.app.api.dependencies import get_simple_service, get_test_doubles_service
from testeando_mvc.app.core.store import KeyValueStore
from testeando_mvc.app.main import create_app
from testeando_mvc.app.services import BaseSimpleService, BaseTestDoublesService


@pytest.fixture
def app():
    """Fresh application (own store, no overrides) in production mode."""
    application = create_app(debug=False)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def store() -> KeyValueStore:
    return KeyValueStore()


@pytest.fixture
def simple_service_mock(app):
    """Autospec'd SimpleService installed in the app.

    Configure return values in the test before issuing requests.
    """
    service = create_autospec(BaseSimpleService, instance=True)
    app.dependency_overrides[get_simple_service] = lambda: service
    return service


@pytest.fixture
def doubles_service_mock(app):
    """Autospec'd TestDoublesService installed in the app, pre-stubbed.

    Every operation returns a harmless value so tests only need to
    change what they care about.
    """
    service = create_autospec(BaseTestDoublesService, instance=True)
    service.procesar_texto.return_value = "PROCESADO"
    service.calcular_descuento.return_value = Decimal("0.10")
    service.obtener_dato.return_value = "valor"
    service.validar_y_procesar.return_value = True
    service.guardar_dato.return_value = None
    service.enviar_notificacion.return_value = None
    app.dependency_overrides[get_test_doubles_service] = lambda: service
    return service
