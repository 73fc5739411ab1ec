"""
Service layer for the small derived facts shown on the home pages.

None of these operations touch storage.  The only sources of
non‑determinism are the clock and the random number generator, both
of which can be injected through the constructor.
"""

import random
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Callable, Optional

VALID_USERNAME = "don_correcto"
VALID_PASSWORD = "iatusabes"


class BaseSimpleService(ABC):
    """Contract consumed by the home controller."""

    @abstractmethod
    def hora_es_par(self) -> bool:
        ...

    @abstractmethod
    def numero_aleatorio(self) -> int:
        ...

    @abstractmethod
    def validar_usuario(self, usuario: str, password: str) -> bool:
        ...

    @abstractmethod
    def es_fin_de_semana(self) -> bool:
        ...

    @abstractmethod
    def obtener_saludo(self, nombre: str) -> str:
        ...

    @abstractmethod
    def calcular_edad(self, fecha_nacimiento: date) -> int:
        ...

    @abstractmethod
    def es_usuario_premium(self, email: str) -> bool:
        ...


class SimpleService(BaseSimpleService):
    """Production implementation of :class:`BaseSimpleService`.

    Parameters
    ----------
    clock : Callable[[], datetime], optional
        Returns the current local time.  Defaults to ``datetime.now``.
    rng : random.Random, optional
        Random number generator.  A private, unseeded instance is
        created when omitted.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._clock = clock or datetime.now
        self._rng = rng or random.Random()

    def hora_es_par(self) -> bool:
        """Return ``True`` when the current hour (0‑23) is even."""
        return self._clock().hour % 2 == 0

    def numero_aleatorio(self) -> int:
        """Return a uniformly distributed integer in ``[1, 100]``."""
        return self._rng.randint(1, 100)

    def validar_usuario(self, usuario: str, password: str) -> bool:
        """Check the credentials against the single hardcoded pair.

        This is a demonstration check only: exact, case‑sensitive
        comparison with no hashing and no rate limiting.
        """
        return usuario == VALID_USERNAME and password == VALID_PASSWORD

    def es_fin_de_semana(self) -> bool:
        # Saturday is 5, Sunday is 6.
        return self._clock().weekday() >= 5

    def obtener_saludo(self, nombre: str) -> str:
        return nombre

    def calcular_edad(self, fecha_nacimiento: date) -> int:
        """Return the number of completed years since ``fecha_nacimiento``.

        ``datetime`` values are accepted and truncated to their date.
        Birth dates in the future yield ``0``.
        """
        if isinstance(fecha_nacimiento, datetime):
            fecha_nacimiento = fecha_nacimiento.date()
        today = self._clock().date()
        years = today.year - fecha_nacimiento.year
        if (today.month, today.day) < (fecha_nacimiento.month, fecha_nacimiento.day):
            years -= 1
        return max(years, 0)

    def es_usuario_premium(self, email: str) -> bool:
        # There is no subscription data yet; every user is premium.
        return True
