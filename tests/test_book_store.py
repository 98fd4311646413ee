import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from books_api.app.schemas.book import BookCreate, BookUpdate
from books_api.app.services.book_store import InMemoryBookStore, SEED_BOOKS, seed_store


def make_clock(start):
    ticks = {"n": 0}

    def clock():
        ticks["n"] += 1
        return start + timedelta(seconds=ticks["n"])

    return clock


@pytest.fixture
def empty_store():
    return InMemoryBookStore(clock=make_clock(datetime(2024, 1, 1, tzinfo=timezone.utc)))


def test_list_books_keeps_insertion_order(empty_store):
    for title in ("A", "B", "C"):
        empty_store.insert(BookCreate(title=title, author="x"))
    assert [b.title for b in empty_store.list_books()] == ["A", "B", "C"]


def test_list_books_returns_a_copy(empty_store):
    empty_store.insert(BookCreate(title="A", author="x"))
    books = empty_store.list_books()
    books.clear()
    assert len(empty_store.list_books()) == 1


def test_insert_assigns_length_plus_one(empty_store):
    first = empty_store.insert(BookCreate(title="A", author="x"))
    second = empty_store.insert(BookCreate(title="B", author="y"))
    assert (first.id, second.id) == (1, 2)


def test_insert_defaults_finished_to_false(empty_store):
    book = empty_store.insert(BookCreate(title="A", author="x"))
    assert book.finished is False


def test_insert_accepts_missing_fields(empty_store):
    book = empty_store.insert(BookCreate())
    assert book.title is None
    assert book.author is None
    assert empty_store.find_by_id(book.id) == book


def test_find_by_id_missing_returns_none(empty_store):
    empty_store.insert(BookCreate(title="A", author="x"))
    assert empty_store.find_by_id(42) is None


def test_replace_merges_only_supplied_fields(empty_store):
    original = empty_store.insert(BookCreate(title="A", author="x", finished=True))
    updated = empty_store.replace(original.id, BookUpdate(title="A2"))
    assert updated.title == "A2"
    assert updated.author == "x"
    assert updated.finished is True
    assert updated.created_at == original.created_at
    assert empty_store.find_by_id(original.id) == updated


def test_replace_keeps_position(empty_store):
    for title in ("A", "B", "C"):
        empty_store.insert(BookCreate(title=title, author="x"))
    empty_store.replace(2, BookUpdate(title="B2", finished=True))
    assert [b.title for b in empty_store.list_books()] == ["A", "B2", "C"]


def test_replace_missing_returns_none(empty_store):
    assert empty_store.replace(7, BookUpdate(title="nope")) is None
    assert empty_store.list_books() == []


def test_remove(empty_store):
    book = empty_store.insert(BookCreate(title="A", author="x"))
    assert empty_store.remove(book.id) is True
    assert empty_store.find_by_id(book.id) is None
    assert empty_store.remove(book.id) is False


def test_length_strategy_reuses_ids_after_delete(empty_store):
    empty_store.insert(BookCreate(title="A", author="x"))
    empty_store.insert(BookCreate(title="B", author="x"))
    empty_store.remove(1)
    reused = empty_store.insert(BookCreate(title="C", author="x"))
    assert reused.id == 2
    assert [b.id for b in empty_store.list_books()] == [2, 2]
    # lookups resolve to the older book first
    assert empty_store.find_by_id(2).title == "B"


def test_counter_strategy_never_reuses_ids():
    store = InMemoryBookStore(id_strategy="counter")
    store.insert(BookCreate(title="A", author="x"))
    store.insert(BookCreate(title="B", author="x"))
    store.remove(2)
    assert store.insert(BookCreate(title="C", author="x")).id == 3


def test_clear_resets_counter():
    store = InMemoryBookStore(id_strategy="counter")
    store.insert(BookCreate(title="A", author="x"))
    store.clear()
    assert len(store) == 0
    assert store.insert(BookCreate(title="B", author="x")).id == 1


def test_unknown_id_strategy_rejected():
    with pytest.raises(ValueError):
        InMemoryBookStore(id_strategy="uuid")


def test_books_are_immutable(empty_store):
    book = empty_store.insert(BookCreate(title="A", author="x"))
    with pytest.raises(ValidationError):
        book.title = "changed"


def test_seed_store(empty_store):
    seed_store(empty_store)
    books = empty_store.list_books()
    assert len(books) == len(SEED_BOOKS)
    assert books[0].id == 1
    assert books[0].title == "The New Turing Omnibus"


def test_replace_applies_explicit_none(empty_store):
    book = empty_store.insert(BookCreate(title="A", author="x", finished=True))
    updated = empty_store.replace(book.id, BookUpdate(title=None, finished=None))
    assert updated.title is None
    assert updated.author == "x"
    assert updated.finished is False


def test_replace_with_nothing_set_keeps_book(empty_store):
    book = empty_store.insert(BookCreate(title="A", author="x", finished=True))
    assert empty_store.replace(book.id, BookUpdate()) == book


@pytest.mark.parametrize("strategy", ["length", "counter"])
def test_concurrent_inserts_get_distinct_ids(strategy):
    store = InMemoryBookStore(id_strategy=strategy)
    count = 200
    start = threading.Barrier(8)

    def worker(offset):
        start.wait()
        return [store.insert(BookCreate(title=f"{offset}-{n}", author="x")).id for n in range(count // 8)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = [book_id for batch in pool.map(worker, range(8)) for book_id in batch]

    assert sorted(ids) == list(range(1, count + 1))
    assert [b.id for b in store.list_books()] == list(range(1, count + 1))
