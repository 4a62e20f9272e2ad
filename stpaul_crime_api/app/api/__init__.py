"""
API package.

``router`` aggregates the resource routers defined in ``endpoints``.
Paths are mounted at the application root (``/codes``,
``/incidents``, ...).
"""
