"""HTTP tests for the Home controller pages backed by SimpleService."""
import logging

import pytest

pytestmark = pytest.mark.integration


@pytest.mark.parametrize("url", ["/", "/Home", "/Home/Index", "/Home/Privacy", "/Home/Login"])
def test_pages_return_200(client, url):
    response = client.get(url)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")


@pytest.mark.parametrize(
    "hora_es_par, expected",
    [
        (True, "¡El servicio funciona correctamente!"),
        (False, "¡El servicio no está funcionando!"),
    ],
)
def test_index_message_follows_service(client, simple_service_mock, hora_es_par, expected):
    simple_service_mock.hora_es_par.return_value = hora_es_par

    response = client.get("/")

    assert response.status_code == 200
    assert expected in response.text
    simple_service_mock.hora_es_par.assert_called_once_with()


@pytest.mark.parametrize("num", [987, 999999999])
def test_numero_aleatorio_shows_the_number(client, simple_service_mock, num):
    simple_service_mock.numero_aleatorio.return_value = num

    response = client.get("/Home/NumeroAleatorio")

    assert response.status_code == 200
    assert f'id="numero_aleatorio">{num}<' in response.text


def test_numero_aleatorio_real_service_in_range(client):
    response = client.get("/Home/NumeroAleatorio")
    marker = 'id="numero_aleatorio">'
    start = response.text.index(marker) + len(marker)
    value = int(response.text[start:response.text.index("<", start)])
    assert 1 <= value <= 100


def test_login_form_posts_credentials(client):
    response = client.get("/Home/Login")
    assert 'action="/Home/ValidarLogin"' in response.text
    assert 'name="usuario"' in response.text
    assert 'name="password"' in response.text


def test_validar_login_with_stub_accepting_everyone(client, simple_service_mock):
    simple_service_mock.validar_usuario.return_value = True

    response = client.post("/Home/ValidarLogin")

    assert response.status_code == 200
    assert "¡Bienvenido! Has iniciado sesión correctamente." in response.text
    # Missing fields bind to empty strings.
    simple_service_mock.validar_usuario.assert_called_once_with("", "")


def test_validar_login_forwards_form_fields(client, simple_service_mock):
    simple_service_mock.validar_usuario.return_value = False

    response = client.post("/Home/ValidarLogin", data={"usuario": "pepito", "password": "x"})

    assert response.status_code == 200
    assert "¡Bienvenido!" not in response.text
    assert "Usuario o contraseña incorrectos." in response.text
    simple_service_mock.validar_usuario.assert_called_once_with("pepito", "x")


@pytest.mark.parametrize(
    "usuario, password, expected",
    [
        ("don_correcto", "iatusabes", "¡Bienvenido! Has iniciado sesión correctamente."),
        ("don_correcto", "mal", "Usuario o contraseña incorrectos."),
    ],
)
def test_validar_login_with_real_service(client, usuario, password, expected):
    response = client.post("/Home/ValidarLogin", data={"usuario": usuario, "password": password})
    assert expected in response.text


@pytest.mark.parametrize(
    "es_fin_de_semana, expected",
    [(True, "Es fin de semana"), (False, "No es fin de semana")],
)
def test_fin_de_semana_message(client, simple_service_mock, es_fin_de_semana, expected):
    simple_service_mock.es_fin_de_semana.return_value = es_fin_de_semana

    response = client.get("/Home/FinDeSemana")

    assert response.status_code == 200
    assert f'id="fin_de_semana">{expected}<' in response.text


def test_error_page_is_not_cached(client):
    response = client.get("/Home/Error")

    assert response.status_code == 200
    assert "no-store" in response.headers["cache-control"]
    assert response.headers["pragma"] == "no-cache"
    assert 'id="request_id"' in response.text


@pytest.mark.parametrize("method", ["get", "post", "put", "delete"])
def test_error_page_accepts_any_method(client, method):
    response = client.request(method.upper(), "/Home/Error", headers={"X-Request-ID": "abc-123"})
    assert response.status_code == 200
    assert 'id="request_id">abc-123<' in response.text


def test_unhandled_exception_redirects_to_error_page(client, simple_service_mock):
    simple_service_mock.hora_es_par.side_effect = RuntimeError("boom")

    response = client.get("/")

    assert response.status_code == 200
    assert response.url.path == "/Home/Error"
    assert response.history[0].status_code == 303
    assert "Error." in response.text


def test_debug_mode_lets_exceptions_propagate(simple_service_mock):
    from fastapi.testclient import TestClient

    from testeando_mvc.app.api.dependencies import get_simple_service
    from testeando_mvc.app.main import create_app

    app = create_app(debug=True)
    app.dependency_overrides[get_simple_service] = lambda: simple_service_mock
    simple_service_mock.hora_es_par.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        TestClient(app).get("/")


def test_user_input_is_escaped(client, doubles_service_mock):
    doubles_service_mock.procesar_texto.return_value = "<SCRIPT>"

    response = client.get("/Home/TestDoubles", params={"input": "<script>"})

    assert "<script>" not in response.text
    assert "&lt;script&gt;" in response.text


@pytest.mark.parametrize(
    "url",
    ["/home/privacy", "/HOME/PRIVACY", "/home/privacy/", "/Home/Privacy/5", "/home/privacy/abc"],
)
def test_conventional_routes_reach_privacy(client, url):
    response = client.get(url)
    assert response.status_code == 200
    assert "Política de privacidad" in response.text


@pytest.mark.parametrize("url", ["/home", "/HOME/INDEX", "/home/index/7"])
def test_conventional_routes_reach_index(client, simple_service_mock, url):
    simple_service_mock.hora_es_par.return_value = True

    response = client.get(url)

    assert response.status_code == 200
    assert "¡El servicio funciona correctamente!" in response.text


def test_conventional_routes_keep_query_and_form(client, simple_service_mock, doubles_service_mock):
    doubles_service_mock.procesar_texto.side_effect = lambda logger, texto: texto.upper()
    simple_service_mock.validar_usuario.return_value = True

    assert "HOLA" in client.get("/home/testdoubles?input=hola").text
    response = client.post("/home/validarlogin", data={"usuario": "u", "password": "p"})
    assert "¡Bienvenido!" in response.text
    simple_service_mock.validar_usuario.assert_called_once_with("u", "p")


@pytest.mark.parametrize("url", ["/Home/NoExiste", "/Home/Privacy/5/6", "/Otro/Privacy"])
def test_unknown_paths_still_404(client, url):
    assert client.get(url).status_code == 404


def test_error_page_answers_head(client):
    response = client.head("/Home/Error")
    assert response.status_code == 200
    assert "no-store" in response.headers["cache-control"]


def test_error_page_answers_options(client):
    assert client.options("/Home/Error").status_code == 200


def test_requests_are_logged_with_canonical_path(client, caplog):
    caplog.set_level(logging.DEBUG, logger="testeando_mvc.request")

    client.get("/home/privacy")

    messages = [r.getMessage() for r in caplog.records if r.name == "testeando_mvc.request"]
    assert messages == ["GET /Home/Privacy -> 200"]
