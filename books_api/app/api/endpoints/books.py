"""
Book endpoints.

These routes expose a CRUD API over the book store:

* ``GET /books`` lists every book.
* ``GET /books/{id}`` returns one book.
* ``POST /books`` creates a book and returns it with status 201.
* ``PUT /books/{id}`` merges the supplied fields into a book (204).
* ``DELETE /books/{id}`` removes a book (204).

Path ids are read the way JavaScript's ``parseInt`` reads them: leading
whitespace and a sign are allowed and anything after the leading
digits is ignored, so ``/books/2abc`` addresses book 2.  An id that
does not start with a number simply matches no book.  Every "not
found" answer is a 404 with an empty body.

The collection answers on both ``/books`` and ``/books/``.
"""

import logging
import re
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Response, status

from books_api.app.api.deps import get_book_store
from books_api.app.schemas.book import Book, BookCreate, BookUpdate
from books_api.app.services.book_store import BookStore

logger = logging.getLogger(__name__)

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|[0-9]+)")

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"description": "The book was not found"}}


def parse_book_id(raw: str) -> Optional[int]:
    """Parse the leading integer of ``raw``; ``None`` if there is none.

    Only ASCII digits count.  A number too long for ``int`` to convert
    cannot belong to any book and is treated as no id at all.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    sign, digits = match.groups()
    try:
        value = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    except ValueError:
        return None
    return -value if sign == "-" else value


def _not_found(raw_id: str) -> Response:
    logger.debug("Book %r not found", raw_id)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[Book])
@router.get("/", response_model=List[Book], include_in_schema=False)
async def list_books(store: BookStore = Depends(get_book_store)) -> List[Book]:
    """Lists all the books."""
    return store.list_books()


@router.get("/{book_id}", response_model=Book, responses=NOT_FOUND_RESPONSE)
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)) -> Union[Book, Response]:
    """Get the book by id."""
    parsed = parse_book_id(book_id)
    book = store.find_by_id(parsed) if parsed is not None else None
    if book is None:
        return _not_found(book_id)
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Book, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_book(
    book_in: Optional[BookCreate] = None,
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Create a new book.

    Nothing is validated beyond JSON types: a payload without a title
    or an author still creates a book, with those fields set to
    ``null``.  ``finished`` defaults to ``false``.
    """
    return store.insert(book_in or BookCreate())


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def update_book(
    book_id: str,
    book_in: Optional[BookUpdate] = None,
    store: BookStore = Depends(get_book_store),
) -> Response:
    """Update the book by the id.

    Omitted fields keep their current value.  A field sent as ``null``
    is cleared, except ``finished`` which becomes ``false``.  ``id``
    and ``createdAt`` never change.
    """
    parsed = parse_book_id(book_id)
    updated = store.replace(parsed, book_in or BookUpdate()) if parsed is not None else None
    if updated is None:
        return _not_found(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)) -> Response:
    """Remove the book by id."""
    parsed = parse_book_id(book_id)
    if parsed is None or not store.remove(parsed):
        return _not_found(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
