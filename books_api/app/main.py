"""
Main entrypoint for the Books API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly, e.g.::

    uvicorn books_api.app.main:app --reload

Interactive documentation is generated from the routes and served
under ``settings.docs_url`` (``/api-docs`` by default).
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .services.book_store import BookStore, InMemoryBookStore, seed_store

OPENAPI_TAGS = [{"name": "Books", "description": "The books managing API"}]


def create_app(store: Optional[BookStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[BookStore]
        Store to serve books from.  When omitted a new
        ``InMemoryBookStore`` is built with the configured id strategy
        and, if ``seed_books`` is enabled, filled with the example
        book.  A store passed in is used as is.
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        description=app_settings.description,
        contact={
            "name": app_settings.contact_name,
            "url": app_settings.contact_url,
            "email": app_settings.contact_email,
        },
        debug=app_settings.debug,
        docs_url=app_settings.docs_url,
        openapi_tags=OPENAPI_TAGS,
    )

    if store is None:
        store = InMemoryBookStore(id_strategy=app_settings.id_strategy)
        if app_settings.seed_books:
            seed_store(store)
    app.state.book_store = store

    app.include_router(api_router)

    logging.getLogger(__name__).debug(
        "Application created (id strategy: %s)", getattr(store, "id_strategy", "n/a")
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
