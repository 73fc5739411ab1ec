"""
View models for the ``Home`` controller pages.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

SUCCESS_MESSAGE = "¡El servicio funciona correctamente!"
FAILURE_MESSAGE = "¡El servicio no está funcionando!"
LOGIN_SUCCESS_MESSAGE = "¡Bienvenido! Has iniciado sesión correctamente."
LOGIN_FAILURE_MESSAGE = "Usuario o contraseña incorrectos."
WEEKEND_MESSAGE = "Es fin de semana"
NOT_WEEKEND_MESSAGE = "No es fin de semana"


class IndexViewModel(BaseModel):
    """Data for the landing page."""

    show_message: bool = Field(..., description="Result of the hour parity check")

    @property
    def message(self) -> str:
        return SUCCESS_MESSAGE if self.show_message else FAILURE_MESSAGE


class RandomNumberViewModel(BaseModel):
    numero: int


class LoginResultViewModel(BaseModel):
    """Outcome of a login attempt."""

    login_exitoso: bool

    @property
    def mensaje(self) -> str:
        return LOGIN_SUCCESS_MESSAGE if self.login_exitoso else LOGIN_FAILURE_MESSAGE


class WeekendViewModel(BaseModel):
    es_fin_de_semana: bool

    @property
    def mensaje(self) -> str:
        return WEEKEND_MESSAGE if self.es_fin_de_semana else NOT_WEEKEND_MESSAGE


class TestDoublesViewModel(BaseModel):
    """Everything the ``TestDoubles`` page shows, one field per double."""

    input: str = Field(..., description="Raw input received in the query string")
    texto_procesado: str = Field(..., description="Dummy: result of procesar_texto")
    descuento_vip: Decimal = Field(..., description="Stub: VIP discount rate")
    descuento_regular: Decimal = Field(..., description="Stub: REGULAR discount rate")
    dato_guardado: str = Field(..., description="Fake: value read back from the store")
    validacion_exitosa: bool = Field(..., description="Spy: result of validar_y_procesar")
    notificacion: str = Field(..., description="Mock: message sent as notification")


class ErrorViewModel(BaseModel):
    request_id: str

    @property
    def show_request_id(self) -> bool:
        return bool(self.request_id)
