"""
FastAPI main application for the Bookshelf API.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookshelf_api.config import config as api_config
from bookshelf_api.exceptions import BookshelfError
from bookshelf_api.models import (
    ApiResponse, BookData, BookIdData, BookListData, BookPayload,
    BookQueryParams, HealthResponse, ResponseStatus
)
from bookshelf_api.service import MSG_ADDED, MSG_DELETED, MSG_UPDATED, BookService
from bookshelf_api.store import BookStore
from utilities.config import config
from utilities.logger import setup_logging

# Setup logging
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file,
        debug=config.debug,
    )
    logger.info("Starting Bookshelf API", version=api_config.api_version)

    yield

    logger.info("Shutting down Bookshelf API", books=len(app.state.book_service.store))


def success_response(
    status_code: int = status.HTTP_200_OK,
    message: Optional[str] = None,
    data=None,
) -> JSONResponse:
    """Wrap a successful outcome in the response envelope."""
    envelope = ApiResponse(status=ResponseStatus.SUCCESS, message=message, data=data)
    return JSONResponse(status_code=status_code, content=envelope.to_json_dict())


def fail_response(
    status_code: int,
    message: str,
    detail: Optional[str] = None,
) -> JSONResponse:
    """Wrap a failure in the response envelope."""
    envelope = ApiResponse(status=ResponseStatus.FAIL, message=message, detail=detail)
    return JSONResponse(status_code=status_code, content=envelope.to_json_dict())


def get_book_service(request: Request) -> BookService:
    """Dependency returning the service bound to this application."""
    return request.app.state.book_service


def create_app(store: Optional[BookStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Book store to serve; a fresh empty store when omitted

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=api_config.api_title,
        description=api_config.api_description,
        version=api_config.api_version,
        lifespan=lifespan,
    )
    app.state.book_service = BookService(store if store is not None else BookStore())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=api_config.cors_allow_credentials,
        allow_methods=api_config.cors_allow_methods,
        allow_headers=api_config.cors_allow_headers,
    )

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed bodies and query parameters."""
        logger.warning("Invalid request", path=request.url.path, errors=str(exc.errors()))
        return fail_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request payload",
            detail=str(exc.errors()) if api_config.debug else None,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error("Unhandled exception", error=str(exc), path=request.url.path)
        return fail_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            detail=str(exc) if api_config.debug else None,
        )

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check(service: BookService = Depends(get_book_service)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=api_config.api_version,
            book_count=len(service.store),
        )

    # Books endpoints
    @app.post("/books", status_code=status.HTTP_201_CREATED, tags=["Books"])
    def add_book(
        payload: BookPayload,
        service: BookService = Depends(get_book_service),
    ):
        """
        Add a book to the shelf.

        - **name** is required
        - **readPage** must not be greater than **pageCount**
        """
        try:
            book_id = service.create_book(payload)
        except BookshelfError as e:
            return fail_response(e.status_code, e.message)

        return success_response(
            status.HTTP_201_CREATED,
            message=MSG_ADDED,
            data=BookIdData(book_id=book_id),
        )

    @app.get("/books", tags=["Books"])
    def get_all_books(
        name: Optional[str] = None,
        reading: Optional[int] = None,
        finished: Optional[int] = None,
        service: BookService = Depends(get_book_service),
    ):
        """
        List books, optionally filtered.

        - **name**: Case-insensitive substring of the book name
        - **reading**: 1 for books being read, 0 for the rest
        - **finished**: 1 for finished books, 0 for the rest
        """
        query_params = BookQueryParams(name=name, reading=reading, finished=finished)
        books = service.list_books(query_params)
        return success_response(data=BookListData(books=books))

    @app.get("/books/{book_id}", tags=["Books"])
    def get_book_by_id(
        book_id: str,
        service: BookService = Depends(get_book_service),
    ):
        """Get a single book by ID."""
        try:
            book = service.get_book(book_id)
        except BookshelfError as e:
            return fail_response(e.status_code, e.message)

        return success_response(data=BookData(book=book))

    @app.put("/books/{book_id}", tags=["Books"])
    def edit_book_by_id(
        book_id: str,
        payload: BookPayload,
        service: BookService = Depends(get_book_service),
    ):
        """Replace every mutable field of a book."""
        try:
            service.update_book(book_id, payload)
        except BookshelfError as e:
            return fail_response(e.status_code, e.message)

        return success_response(message=MSG_UPDATED)

    @app.delete("/books/{book_id}", tags=["Books"])
    def delete_book_by_id(
        book_id: str,
        service: BookService = Depends(get_book_service),
    ):
        """Remove a book from the shelf."""
        try:
            service.delete_book(book_id)
        except BookshelfError as e:
            return fail_response(e.status_code, e.message)

        return success_response(message=MSG_DELETED)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bookshelf_api.main:app",
        host=api_config.host,
        port=api_config.port,
        reload=api_config.debug,
        log_level=config.log_level.lower()
    )
