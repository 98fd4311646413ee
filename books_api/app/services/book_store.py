"""
Book storage.

``BookStore`` is the interface the HTTP handlers depend on;
``InMemoryBookStore`` keeps the books in an ordered Python list that
lives for as long as the process does.  Every public method of the
in‑memory store runs under a single lock, so id assignment and list
mutation stay atomic even when FastAPI serves requests from several
threads.

Id assignment
-------------
With the default ``length`` strategy a new book receives
``len(books) + 1``.  After a deletion this can hand out an id that is
still held by another book, in which case lookups by that id find the
older book first.  The ``counter`` strategy keeps a monotonically
increasing counter instead and never reuses an id.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List, Optional

from books_api.app.schemas.book import Book, BookCreate, BookUpdate

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("length", "counter")

SEED_BOOKS = (
    BookCreate(title="The New Turing Omnibus", author="Alexander K. Dewdney", finished=False),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookStore(ABC):
    """Interface for a container of books ordered by insertion."""

    @abstractmethod
    def list_books(self) -> List[Book]:
        """Return every book in insertion order."""

    @abstractmethod
    def find_by_id(self, book_id: int) -> Optional[Book]:
        """Return the first book with ``book_id`` or ``None``."""

    @abstractmethod
    def insert(self, data: BookCreate) -> Book:
        """Create a book from ``data``, append it and return it."""

    @abstractmethod
    def replace(self, book_id: int, changes: BookUpdate) -> Optional[Book]:
        """Merge ``changes`` into the book with ``book_id``.

        Fields set on ``changes`` replace the stored ones, ``None`` included.
        Returns the new book, or ``None`` if no book has that id.
        """

    @abstractmethod
    def remove(self, book_id: int) -> bool:
        """Delete the book with ``book_id``; ``False`` if it does not exist."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all books."""


class InMemoryBookStore(BookStore):
    """List‑backed ``BookStore`` guarded by a ``threading.Lock``."""

    def __init__(
        self,
        id_strategy: str = "length",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy '{id_strategy}'. Allowed: {', '.join(ID_STRATEGIES)}"
            )
        self.id_strategy = id_strategy
        self._clock = clock or _utcnow
        self._books: List[Book] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def find_by_id(self, book_id: int) -> Optional[Book]:
        with self._lock:
            index = self._index_of(book_id)
            return None if index is None else self._books[index]

    def insert(self, data: BookCreate) -> Book:
        with self._lock:
            book = Book(
                id=self._next_id(),
                title=data.title,
                author=data.author,
                finished=data.finished if data.finished is not None else False,
                created_at=self._clock(),
            )
            self._books.append(book)
            self._last_id = max(self._last_id, book.id)
        logger.info("Created book %s", book.id)
        return book

    def replace(self, book_id: int, changes: BookUpdate) -> Optional[Book]:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            current = self._books[index]
            # Only fields present in the payload count; an explicit null clears.
            supplied = changes.model_fields_set
            updated = Book(
                id=current.id,
                title=changes.title if "title" in supplied else current.title,
                author=changes.author if "author" in supplied else current.author,
                finished=bool(changes.finished) if "finished" in supplied else current.finished,
                created_at=current.created_at,
            )
            self._books[index] = updated
        logger.info("Updated book %s", book_id)
        return updated

    def remove(self, book_id: int) -> bool:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            del self._books[index]
        logger.info("Deleted book %s", book_id)
        return True

    def clear(self) -> None:
        with self._lock:
            self._books.clear()
            self._last_id = 0

    def _index_of(self, book_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def _next_id(self) -> int:
        # Caller must hold the lock.
        if self.id_strategy == "counter":
            return self._last_id + 1
        return len(self._books) + 1


def seed_store(store: BookStore) -> None:
    """Insert the example books every fresh application starts with."""
    for data in SEED_BOOKS:
        store.insert(data)
    logger.debug("Seeded store with %d book(s)", len(SEED_BOOKS))
