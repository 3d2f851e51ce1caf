"""
Domain errors raised by the book service.
"""


class BookshelfError(Exception):
    """Base class for errors that map onto a fail response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookValidationError(BookshelfError):
    """The submitted book is missing its name or has readPage above pageCount."""

    status_code = 400


class BookNotFoundError(BookshelfError):
    """No book with the requested id is on the shelf."""

    status_code = 404


class BookInsertError(BookshelfError):
    """A freshly inserted book could not be found in the store."""

    status_code = 500
