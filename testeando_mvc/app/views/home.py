"""
Views for the ``Home`` controller.
"""

import html
from decimal import Decimal

from testeando_mvc.app.schemas.home import (
    ErrorViewModel,
    IndexViewModel,
    LoginResultViewModel,
    RandomNumberViewModel,
    TestDoublesViewModel,
    WeekendViewModel,
)
from testeando_mvc.app.views import render_page


def _percent(rate: Decimal) -> str:
    return f"{rate * 100:.0f}%"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def index(model: IndexViewModel) -> str:
    body = f'        <h1 class="display-4">{html.escape(model.message)}</h1>'
    return render_page("Inicio", body)


def numero_aleatorio(model: RandomNumberViewModel) -> str:
    body = (
        "        <h1>Tu número de la suerte</h1>\n"
        f'        <p>El número es: <span id="numero_aleatorio">{model.numero}</span></p>'
    )
    return render_page("Número aleatorio", body)


def login() -> str:
    body = """        <h1>Iniciar sesión</h1>
        <form method="post" action="/Home/ValidarLogin">
            <label for="usuario">Usuario</label>
            <input type="text" id="usuario" name="usuario" />
            <label for="password">Contraseña</label>
            <input type="password" id="password" name="password" />
            <button type="submit">Entrar</button>
        </form>"""
    return render_page("Login", body)


def validar_login(model: LoginResultViewModel) -> str:
    css = "alert-success" if model.login_exitoso else "alert-danger"
    body = (
        f'        <div class="alert {css}" id="resultado_login">{html.escape(model.mensaje)}</div>\n'
        '        <a href="/Home/Login">Volver</a>'
    )
    return render_page("Login", body)


def fin_de_semana(model: WeekendViewModel) -> str:
    body = f'        <h1 id="fin_de_semana">{html.escape(model.mensaje)}</h1>'
    return render_page("Fin de semana", body)


def test_doubles(model: TestDoublesViewModel) -> str:
    rows = [
        ("Dummy", "Texto procesado", "texto_procesado", html.escape(model.texto_procesado)),
        ("Stub", "Descuento VIP", "descuento_vip", _percent(model.descuento_vip)),
        ("Stub", "Descuento regular", "descuento_regular", _percent(model.descuento_regular)),
        ("Fake", "Dato guardado", "dato_guardado", html.escape(model.dato_guardado)),
        ("Spy", "Validación exitosa", "validacion_exitosa", _flag(model.validacion_exitosa)),
        ("Mock", "Notificación enviada", "notificacion", html.escape(model.notificacion)),
    ]
    cells = "\n".join(
        f'            <tr><td>{kind}</td><td>{label}</td><td id="{element_id}">{value}</td></tr>'
        for kind, label, element_id, value in rows
    )
    body = (
        "        <h1>Test Doubles</h1>\n"
        f'        <p>Input: <code id="input">{html.escape(model.input)}</code></p>\n'
        "        <table>\n"
        "            <tr><th>Tipo</th><th>Operación</th><th>Resultado</th></tr>\n"
        f"{cells}\n"
        "        </table>"
    )
    return render_page("Test Doubles", body)


def privacy() -> str:
    body = (
        "        <h1>Política de privacidad</h1>\n"
        "        <p>Esta aplicación de demostración no almacena datos personales.</p>"
    )
    return render_page("Privacidad", body)


def error(model: ErrorViewModel) -> str:
    parts = [
        '        <h1 class="text-danger">Error.</h1>',
        '        <h2 class="text-danger">Ocurrió un error al procesar tu solicitud.</h2>',
    ]
    if model.show_request_id:
        parts.append(
            f'        <p><strong>Request ID:</strong> <code id="request_id">{html.escape(model.request_id)}</code></p>'
        )
    return render_page("Error", "\n".join(parts))
