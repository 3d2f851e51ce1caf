"""
Service layer for book operations.
"""

from typing import List

from bookshelf_api.exceptions import BookInsertError, BookNotFoundError, BookValidationError
from bookshelf_api.models import Book, BookPayload, BookQueryParams, BookSummary
from bookshelf_api.store import BookStore
from utilities.logger import BookEventLogger

MSG_ADDED = "Book added successfully"
MSG_ADD_FAILED = "Failed to add book"
MSG_UPDATED = "Book updated successfully"
MSG_UPDATE_FAILED = "Failed to update book"
MSG_DELETED = "Book deleted successfully"
MSG_NOT_FOUND = "Book not found"
MSG_MISSING_NAME = "Please provide the book name"
MSG_READ_PAGE_TOO_HIGH = "readPage must not be greater than pageCount"
MSG_ID_NOT_FOUND = "Id not found"


def is_finished(payload: BookPayload) -> bool:
    """A book is finished once readPage has reached pageCount."""
    return payload.page_count == payload.read_page


class BookService:
    """Book operations over a ``BookStore``."""

    def __init__(self, store: BookStore, event_logger: BookEventLogger = None):
        self.store = store
        self.events = event_logger or BookEventLogger("bookshelf_api.service")

    def _validate(self, payload: BookPayload, operation: str, prefix: str) -> None:
        """
        Reject payloads without a name or with readPage above pageCount.

        Args:
            payload: Submitted book fields
            operation: Operation name for logging
            prefix: Leading sentence of the failure message

        Raises:
            BookValidationError: If the payload is invalid
        """
        if not payload.name:
            self.events.log_rejected(operation, "missing name")
            raise BookValidationError(f"{prefix}. {MSG_MISSING_NAME}")

        if (
            payload.read_page is not None
            and payload.page_count is not None
            and payload.read_page > payload.page_count
        ):
            self.events.log_rejected(operation, "readPage greater than pageCount")
            raise BookValidationError(f"{prefix}. {MSG_READ_PAGE_TOO_HIGH}")

    def create_book(self, payload: BookPayload) -> str:
        """
        Add a new book to the shelf.

        Args:
            payload: Submitted book fields

        Returns:
            The id assigned to the new book

        Raises:
            BookValidationError: If name is missing or readPage > pageCount
            BookInsertError: If the book cannot be found right after insertion
        """
        self._validate(payload, "create", MSG_ADD_FAILED)

        book_id = self.store.next_id()
        inserted_at = self.store.now()

        book = Book(
            id=book_id,
            **payload.model_dump(),
            finished=is_finished(payload),
            inserted_at=inserted_at,
            updated_at=inserted_at,
        )
        self.store.append(book)

        if not self.store.contains(book_id):
            self.events.log_insert_failure(book_id)
            raise BookInsertError(MSG_ADD_FAILED)

        self.events.log_book_created(book_id, book.name)
        return book_id

    def list_books(self, query: BookQueryParams) -> List[BookSummary]:
        """
        List books matching every supplied filter, in insertion order.

        Args:
            query: Optional name, reading and finished filters

        Returns:
            Matching books projected to id, name and publisher
        """
        books = self.store.all()

        if query.name:
            search_name = query.name.lower()
            books = [book for book in books if search_name in book.name.lower()]

        if query.reading is not None:
            is_reading = query.reading == 1
            books = [book for book in books if book.reading == is_reading]

        if query.finished is not None:
            finished = query.finished == 1
            books = [book for book in books if book.finished == finished]

        return [
            BookSummary(id=book.id, name=book.name, publisher=book.publisher)
            for book in books
        ]

    def get_book(self, book_id: str) -> Book:
        """
        Get a single book by id.

        Raises:
            BookNotFoundError: If no book has this id
        """
        book = self.store.get(book_id)
        if book is None:
            self.events.log_not_found("get", book_id)
            raise BookNotFoundError(MSG_NOT_FOUND)
        return book

    def update_book(self, book_id: str, payload: BookPayload) -> Book:
        """
        Overwrite every mutable field of a book.

        Validation runs before the lookup, so an invalid payload for an
        unknown id is reported as a validation failure.

        Args:
            book_id: Id of the book to update
            payload: Replacement book fields

        Returns:
            The updated record

        Raises:
            BookValidationError: If name is missing or readPage > pageCount
            BookNotFoundError: If no book has this id
        """
        self._validate(payload, "update", MSG_UPDATE_FAILED)

        updated_at = self.store.now()
        index = self.store.index_of(book_id)
        if index == -1:
            self.events.log_not_found("update", book_id)
            raise BookNotFoundError(f"{MSG_UPDATE_FAILED}. {MSG_ID_NOT_FOUND}")

        current = self.store[index]
        book = current.model_copy(update={
            **payload.model_dump(),
            "finished": is_finished(payload),
            "updated_at": updated_at,
        })
        self.store.replace(index, book)

        self.events.log_book_updated(book_id, book.finished)
        return book

    def delete_book(self, book_id: str) -> None:
        """
        Remove a book from the shelf.

        Raises:
            BookNotFoundError: If no book has this id
        """
        if not self.store.remove(book_id):
            self.events.log_not_found("delete", book_id)
            raise BookNotFoundError(f"Failed to delete book. {MSG_ID_NOT_FOUND}")

        self.events.log_book_deleted(book_id)
