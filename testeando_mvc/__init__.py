"""
Top‑level package for TesteandoMVC.

This file makes ``testeando_mvc`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``testeando_mvc.app.main``.  Tests import the application factory
from there.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
