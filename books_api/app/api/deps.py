"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from books_api.app.services.book_store import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the store the application was created with."""
    return request.app.state.book_store
