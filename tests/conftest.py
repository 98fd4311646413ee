from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from books_api.app.main import create_app
from books_api.app.schemas.book import BookCreate
from books_api.app.services.book_store import InMemoryBookStore

FIXED_NOW = datetime(2020, 3, 10, 4, 5, 6, 157000, tzinfo=timezone.utc)


@pytest.fixture
def store():
    # Every test gets its own store seeded with a single book, like a fresh server
    store = InMemoryBookStore(clock=lambda: FIXED_NOW)
    store.insert(BookCreate(title="The New Turing Omnibus", author="Alexander K. Dewdney"))
    return store


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
