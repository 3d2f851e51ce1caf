"""
API models and schemas for the FastAPI application.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel

# JSON numbers: integers stay integers, fractions are kept as floats
Number = Union[int, float]


class CamelModel(BaseModel):
    """Base model exposing snake_case attributes under camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump with JSON aliases, leaving out unset optional values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BookPayload(CamelModel):
    """Request body for creating or updating a book.

    Every field is optional here so that a missing name is reported
    by the service with its own message instead of a schema error.
    """
    name: Optional[str] = Field(None, description="Book title")
    year: Optional[Number] = Field(None, description="Publication year")
    author: Optional[str] = Field(None, description="Book author")
    summary: Optional[str] = Field(None, description="Short summary")
    publisher: Optional[str] = Field(None, description="Publisher name")
    page_count: Optional[Number] = Field(None, description="Total number of pages")
    read_page: Optional[Number] = Field(None, description="Last page read")
    reading: Optional[StrictBool] = Field(None, description="Whether the book is being read")


class Book(CamelModel):
    """A stored book record."""
    id: str = Field(..., description="Unique book identifier")
    name: str = Field(..., description="Book title")
    year: Optional[Number] = Field(None, description="Publication year")
    author: Optional[str] = Field(None, description="Book author")
    summary: Optional[str] = Field(None, description="Short summary")
    publisher: Optional[str] = Field(None, description="Publisher name")
    page_count: Optional[Number] = Field(None, description="Total number of pages")
    read_page: Optional[Number] = Field(None, description="Last page read")
    finished: bool = Field(..., description="True when readPage equals pageCount")
    reading: Optional[bool] = Field(None, description="Whether the book is being read")
    inserted_at: str = Field(..., description="Creation timestamp")
    updated_at: str = Field(..., description="Last update timestamp")


class BookSummary(CamelModel):
    """Projection of a book used in listings."""
    id: str = Field(..., description="Unique book identifier")
    name: str = Field(..., description="Book title")
    publisher: Optional[str] = Field(None, description="Publisher name")


class BookQueryParams(BaseModel):
    """Query parameters for book listing."""
    name: Optional[str] = Field(None, description="Case-insensitive substring of the name")
    reading: Optional[int] = Field(None, description="1 for books being read, 0 otherwise")
    finished: Optional[int] = Field(None, description="1 for finished books, 0 otherwise")


class ResponseStatus(str, Enum):
    """Envelope status values."""
    SUCCESS = "success"
    FAIL = "fail"


class BookIdData(CamelModel):
    """Payload returned after a book is created."""
    book_id: str = Field(..., description="Identifier of the new book")


class BookData(CamelModel):
    """Payload wrapping a single book."""
    book: Book


class BookListData(CamelModel):
    """Payload wrapping a list of book summaries."""
    books: List[BookSummary] = Field(default_factory=list)


class ApiResponse(CamelModel):
    """Response envelope shared by every book endpoint."""
    status: ResponseStatus = Field(..., description="success or fail")
    message: Optional[str] = Field(None, description="Human-readable outcome")
    data: Optional[Union[BookIdData, BookData, BookListData]] = Field(None, description="Result payload")
    detail: Optional[str] = Field(None, description="Additional error details")

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump with the status enum rendered as its value."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class HealthResponse(CamelModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    book_count: int = Field(..., description="Number of books on the shelf")
