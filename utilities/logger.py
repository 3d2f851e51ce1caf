"""
Structured logging system using structlog.
Provides structured logging with different output formats and levels.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Optional
import structlog
from structlog.stdlib import LoggerFactory


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[str] = None,
    debug: bool = False
) -> None:
    """
    Set up structured logging with configurable output formats.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        log_file: Optional log file path
        debug: Enable debug mode for call-site information
    """

    level = getattr(logging, log_level.upper())

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(message)s'))

        logging.getLogger().addHandler(file_handler)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging system initialized",
        level=log_level,
        format=log_format,
        file=str(log_file) if log_file else None,
        debug=debug
    )


class BookEventLogger:
    """
    Logger for bookshelf domain events with context management.
    """

    def __init__(self, name: str = "bookshelf"):
        self.logger = structlog.get_logger(name)
        self.context = {}

    def bind_context(self, **kwargs: Any) -> 'BookEventLogger':
        """
        Bind context variables to the logger.

        Args:
            **kwargs: Context variables to bind

        Returns:
            Self for method chaining
        """
        self.context.update(kwargs)
        return self

    def clear_context(self) -> 'BookEventLogger':
        """Clear all context variables."""
        self.context.clear()
        return self

    def log_book_created(self, book_id: str, name: str) -> None:
        """Log a newly shelved book."""
        self.logger.info("Book created", book_id=book_id, name=name, **self.context)

    def log_book_updated(self, book_id: str, finished: bool) -> None:
        """Log an in-place book update."""
        self.logger.info("Book updated", book_id=book_id, finished=finished, **self.context)

    def log_book_deleted(self, book_id: str) -> None:
        """Log a book removal."""
        self.logger.info("Book deleted", book_id=book_id, **self.context)

    def log_rejected(self, operation: str, reason: str) -> None:
        """Log a write rejected by validation."""
        self.logger.warning(
            "Book write rejected",
            operation=operation,
            reason=reason,
            **self.context
        )

    def log_not_found(self, operation: str, book_id: str) -> None:
        """Log a lookup for an unknown id."""
        self.logger.debug(
            "Book not found",
            operation=operation,
            book_id=book_id,
            **self.context
        )

    def log_insert_failure(self, book_id: str) -> None:
        """Log a record missing from the store right after insertion."""
        self.logger.error("Book insert check failed", book_id=book_id, **self.context)
