"""
HTML views.

Views are plain functions that take a view model and return an HTML
string.  Every value that may contain user input is escaped with
``html.escape`` before it is interpolated.
"""

import html
from typing import Optional

from testeando_mvc.app.core.config import settings

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="es">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{title} - {project}</title>
</head>
<body>
    <header>
        <nav>
            <a href="/">Inicio</a>
            <a href="/Home/NumeroAleatorio">Número aleatorio</a>
            <a href="/Home/Login">Login</a>
            <a href="/Home/FinDeSemana">Fin de semana</a>
            <a href="/Home/TestDoubles">Test Doubles</a>
            <a href="/Home/Privacy">Privacidad</a>
        </nav>
    </header>
    <main role="main">
{body}
    </main>
    <footer>&copy; {project}</footer>
</body>
</html>
"""


def render_page(title: str, body: str, project: Optional[str] = None) -> str:
    """Wrap ``body`` (already escaped HTML) in the shared layout."""
    project = project or settings.project_name
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        project=html.escape(project),
        body=body,
    )
