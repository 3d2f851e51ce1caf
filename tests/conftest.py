"""
Pytest configuration and shared fixtures.
"""

import itertools

import pytest
from fastapi.testclient import TestClient

from bookshelf_api.main import create_app
from bookshelf_api.service import BookService
from bookshelf_api.store import BookStore


@pytest.fixture
def id_provider():
    """Deterministic id provider yielding book-1, book-2, ..."""
    counter = itertools.count(1)
    return lambda: f"book-{next(counter)}"


@pytest.fixture
def clock():
    """Clock that advances one second on every call."""
    ticks = itertools.count(0)
    return lambda: f"2024-01-01T00:00:{next(ticks):02d}.000Z"


@pytest.fixture
def book_store(id_provider, clock):
    """Fresh, empty book store."""
    return BookStore(id_provider=id_provider, clock=clock)


@pytest.fixture
def book_service(book_store):
    """Book service over the fresh store."""
    return BookService(book_store)


@pytest.fixture
def client(book_store):
    """Test client for an application serving the fresh store."""
    return TestClient(create_app(store=book_store))


@pytest.fixture
def sample_book_payload():
    """Complete, valid book body as sent by a client."""
    return {
        "name": "Buku A",
        "year": 2010,
        "author": "John Doe",
        "summary": "Lorem ipsum dolor sit amet",
        "publisher": "Dicoding Indonesia",
        "pageCount": 100,
        "readPage": 25,
        "reading": False,
    }
