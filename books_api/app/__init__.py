"""
Application package initializer.

The service is split into a handful of small pieces: ``core`` holds
settings and logging, ``schemas`` the Pydantic payloads, ``services``
the book store and ``api`` the HTTP routes.  ``main`` wires them
together into a FastAPI application.
"""

from .main import app, create_app  # noqa: F401
