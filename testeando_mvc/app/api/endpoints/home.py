"""
``Home`` controller.

Each route asks one of the services for its data, packs the result in
a view model from ``schemas.home`` and renders it with the matching
view.  Services are injected with ``Depends`` so that tests can
replace them with test doubles.

Handlers are plain functions; FastAPI runs them in its threadpool.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse

from testeando_mvc.app.api.dependencies import get_simple_service, get_test_doubles_service
from testeando_mvc.app.schemas.home import (
    ErrorViewModel,
    IndexViewModel,
    LoginResultViewModel,
    RandomNumberViewModel,
    TestDoublesViewModel,
    WeekendViewModel,
)
from testeando_mvc.app.services import BaseSimpleService, BaseTestDoublesService
from testeando_mvc.app.views import home as views

logger = logging.getLogger(__name__)

router = APIRouter()

# Key under which the TestDoubles page stores the received input.
TEST_DOUBLES_KEY = "test_key"

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache",
    "Pragma": "no-cache",
}


@router.get("/", response_class=HTMLResponse)
@router.get("/Home", response_class=HTMLResponse, include_in_schema=False)
@router.get("/Home/Index", response_class=HTMLResponse, include_in_schema=False)
def index(service: BaseSimpleService = Depends(get_simple_service)) -> HTMLResponse:
    """Landing page; the message depends on the parity of the current hour."""
    model = IndexViewModel(show_message=service.hora_es_par())
    logger.debug("Index: show_message=%s", model.show_message)
    return HTMLResponse(views.index(model))


@router.get("/Home/NumeroAleatorio", response_class=HTMLResponse)
def numero_aleatorio(service: BaseSimpleService = Depends(get_simple_service)) -> HTMLResponse:
    model = RandomNumberViewModel(numero=service.numero_aleatorio())
    logger.debug("NumeroAleatorio: %s", model.numero)
    return HTMLResponse(views.numero_aleatorio(model))


@router.get("/Home/Login", response_class=HTMLResponse)
def login() -> HTMLResponse:
    return HTMLResponse(views.login())


@router.post("/Home/ValidarLogin", response_class=HTMLResponse)
def validar_login(
    usuario: str = Form(""),
    password: str = Form(""),
    service: BaseSimpleService = Depends(get_simple_service),
) -> HTMLResponse:
    """Check the submitted credentials.

    Missing form fields are treated as empty strings rather than
    rejected, so an empty POST simply fails the check.
    """
    model = LoginResultViewModel(login_exitoso=service.validar_usuario(usuario, password))
    logger.info("Login attempt for %r: %s", usuario, "ok" if model.login_exitoso else "rejected")
    return HTMLResponse(views.validar_login(model))


@router.get("/Home/FinDeSemana", response_class=HTMLResponse)
def fin_de_semana(service: BaseSimpleService = Depends(get_simple_service)) -> HTMLResponse:
    model = WeekendViewModel(es_fin_de_semana=service.es_fin_de_semana())
    return HTMLResponse(views.fin_de_semana(model))


@router.get("/Home/TestDoubles", response_class=HTMLResponse)
def test_doubles(
    input_text: str = Query("demo", alias="input"),
    service: BaseTestDoublesService = Depends(get_test_doubles_service),
) -> HTMLResponse:
    """Exercise every operation of the test doubles service.

    The call order is part of the page's contract: text processing,
    VIP then REGULAR discount, store write then read, validation and
    finally the notification.
    """
    texto_procesado = service.procesar_texto(logger, input_text)
    descuento_vip = service.calcular_descuento("VIP")
    descuento_regular = service.calcular_descuento("REGULAR")
    service.guardar_dato(TEST_DOUBLES_KEY, input_text)
    dato_guardado = service.obtener_dato(TEST_DOUBLES_KEY)
    validacion_exitosa = service.validar_y_procesar(input_text)
    notificacion = f"Procesado: {input_text}"
    service.enviar_notificacion(notificacion)

    model = TestDoublesViewModel(
        input=input_text,
        texto_procesado=texto_procesado,
        descuento_vip=descuento_vip,
        descuento_regular=descuento_regular,
        dato_guardado=dato_guardado,
        validacion_exitosa=validacion_exitosa,
        notificacion=notificacion,
    )
    return HTMLResponse(views.test_doubles(model))


@router.get("/Home/Privacy", response_class=HTMLResponse)
def privacy() -> HTMLResponse:
    return HTMLResponse(views.privacy())


@router.api_route(
    "/Home/Error",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    response_class=HTMLResponse,
)
def error(request: Request) -> HTMLResponse:
    """Generic error page.

    Shows a request identifier (taken from ``X-Request-ID`` when the
    client sent one) and is never cached.
    """
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    model = ErrorViewModel(request_id=request_id)
    return HTMLResponse(views.error(model), headers=NO_CACHE_HEADERS)
