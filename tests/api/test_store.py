"""
Unit tests for the in-memory book store.
"""

import re

from bookshelf_api.models import Book
from bookshelf_api.store import BookStore, generate_book_id, utc_now_iso


def make_book(book_id, name="A"):
    return Book(
        id=book_id,
        name=name,
        finished=False,
        inserted_at="2024-01-01T00:00:00.000Z",
        updated_at="2024-01-01T00:00:00.000Z",
    )


def test_generate_book_id_is_url_safe():
    book_id = generate_book_id()

    assert len(book_id) == 16
    assert re.fullmatch(r"[A-Za-z0-9_-]+", book_id)


def test_generate_book_id_custom_size():
    assert len(generate_book_id(8)) == 8


def test_generated_ids_differ():
    assert len({generate_book_id() for _ in range(100)}) == 100


def test_utc_now_iso_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())


def test_injected_providers(book_store):
    assert book_store.next_id() == "book-1"
    assert book_store.next_id() == "book-2"
    assert book_store.now() == "2024-01-01T00:00:00.000Z"


def test_default_providers():
    store = BookStore()

    assert len(store.next_id()) == 16
    assert store.now().endswith("Z")


def test_append_and_lookup(book_store):
    book_store.append(make_book("a"))
    book_store.append(make_book("b"))

    assert len(book_store) == 2
    assert book_store.index_of("b") == 1
    assert book_store.index_of("zzz") == -1
    assert book_store.contains("a")
    assert book_store.get("a").id == "a"
    assert book_store.get("zzz") is None


def test_replace_keeps_position(book_store):
    book_store.append(make_book("a"))
    book_store.append(make_book("b"))

    book_store.replace(0, make_book("a", name="A2"))

    assert [book.name for book in book_store] == ["A2", "A"]
    assert book_store[0].name == "A2"


def test_remove(book_store):
    book_store.append(make_book("a"))

    assert book_store.remove("a") is True
    assert book_store.remove("a") is False
    assert len(book_store) == 0


def test_all_is_a_snapshot(book_store):
    book_store.append(make_book("a"))
    snapshot = book_store.all()

    book_store.append(make_book("b"))

    assert [book.id for book in snapshot] == ["a"]


def test_stores_are_isolated():
    first, second = BookStore(), BookStore()

    first.append(make_book("a"))

    assert len(second) == 0
