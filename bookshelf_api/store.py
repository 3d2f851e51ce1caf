"""
In-memory book store.

Books are kept in insertion order inside a plain list owned by a
``BookStore`` instance. The store is created explicitly and handed to the
service, so every application (and every test) gets its own shelf. Id
generation and the clock are injected as callables for the same reason.
"""

import secrets
import string
from datetime import datetime, timezone
from typing import Callable, Iterator, List, Optional

import structlog

from bookshelf_api.models import Book
from utilities.config import config

logger = structlog.get_logger(__name__)

IdProvider = Callable[[], str]
Clock = Callable[[], str]

# URL-safe alphabet: ids can be dropped into a path segment as-is
ID_ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_book_id(size: Optional[int] = None) -> str:
    """Return a random URL-safe token of ``size`` characters."""
    length = size or config.book_id_length
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class BookStore:
    """Ordered, process-local collection of book records.

    Not synchronised: callers are expected to handle one request at a time.
    """

    def __init__(
        self,
        id_provider: Optional[IdProvider] = None,
        clock: Optional[Clock] = None,
    ):
        self._books: List[Book] = []
        self._id_provider = id_provider or generate_book_id
        self._clock = clock or utc_now_iso

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __getitem__(self, index: int) -> Book:
        return self._books[index]

    def next_id(self) -> str:
        return self._id_provider()

    def now(self) -> str:
        return self._clock()

    def all(self) -> List[Book]:
        """Snapshot of every book in insertion order."""
        return list(self._books)

    def append(self, book: Book) -> None:
        self._books.append(book)
        logger.debug("Book appended to store", book_id=book.id, size=len(self._books))

    def index_of(self, book_id: str) -> int:
        """Position of the book with ``book_id``, or -1 when absent."""
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return -1

    def contains(self, book_id: str) -> bool:
        return self.index_of(book_id) != -1

    def get(self, book_id: str) -> Optional[Book]:
        index = self.index_of(book_id)
        if index == -1:
            return None
        return self._books[index]

    def replace(self, index: int, book: Book) -> None:
        """Swap the record at ``index`` in place, keeping its position."""
        self._books[index] = book

    def remove(self, book_id: str) -> bool:
        """
        Remove the book with ``book_id``.

        Returns:
            True if a record was removed, False if the id is unknown
        """
        index = self.index_of(book_id)
        if index == -1:
            return False
        del self._books[index]
        logger.debug("Book removed from store", book_id=book_id, size=len(self._books))
        return True
