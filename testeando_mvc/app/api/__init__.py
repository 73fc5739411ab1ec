"""
Controller package.

``router`` aggregates the controller routers and ``dependencies``
exposes the providers through which services reach them.  New
controllers get their own module under ``endpoints`` and are included
in ``router.py``.
"""
