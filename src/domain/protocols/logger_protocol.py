"""LoggerProtocol: structured logging port used by handlers and error handlers.

Events are short snake_case names with key-value context, never
interpolated strings:

    logger.info("community_created", community_id=community.id)
    logger.warning("community_replace_conflict", community_id=9)
    logger.error("community_listing_failed", error=exc, page_number=2)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger port."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation.

        Args:
            message: Event name.
            error: Exception behind the failure, if any.
            **context: Structured key-value context fields.
        """
        ...
