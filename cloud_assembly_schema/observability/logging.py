"""
Logging utilities for CLOUD_ASSEMBLY_SCHEMA.

Provides structured logging with the manifest being processed attached to
every record.
"""

import contextvars
import logging
from typing import Any

# Context variable for the manifest currently being loaded or saved
_manifest_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "manifest_context", default=None
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def set_manifest_context(file_path: str | None = None, kind: str | None = None, **kwargs: Any) -> None:
    """
    Set manifest context for logging.

    Args:
        file_path: Path of the manifest file
        kind: Document kind ("assembly" or "assets")
        **kwargs: Additional context
    """
    context = {"file_path": file_path, "kind": kind, **kwargs}
    _manifest_context.set(context)


def clear_manifest_context() -> None:
    """Clear manifest context."""
    _manifest_context.set(None)


def get_logging_context() -> dict[str, Any]:
    """
    Get current logging context.

    Returns:
        Dictionary with context information
    """
    context: dict[str, Any] = {}

    manifest_context = _manifest_context.get()
    if manifest_context:
        context.update({k: v for k, v in manifest_context.items() if v is not None})

    return context


class ContextualLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that automatically adds manifest context to log records.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add context to log records."""
        context = get_logging_context()

        extra = kwargs.get("extra", {})
        if extra:
            context.update(extra)

        kwargs["extra"] = context
        return msg, kwargs


def get_logger(name: str) -> ContextualLoggerAdapter:
    """
    Get a contextual logger that automatically adds manifest context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        ContextualLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLoggerAdapter(base_logger, {})


def log_operation(
    logger: logging.Logger | logging.LoggerAdapter,
    operation: str,
    level: int = logging.INFO,
    success: bool = True,
    duration_ms: float | None = None,
    **context: Any,
) -> None:
    """
    Log an operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name
        level: Log level
        success: Whether operation succeeded
        duration_ms: Operation duration in milliseconds
        **context: Additional context
    """
    log_context = get_logging_context()
    log_context.update(
        {
            "operation": operation,
            "success": success,
        }
    )

    if duration_ms is not None:
        log_context["duration_ms"] = round(duration_ms, 2)

    if context:
        log_context.update(context)

    message = f"Operation: {operation}"
    if not success:
        message = f"Operation failed: {operation}"
    if duration_ms is not None:
        message += f" (duration: {duration_ms:.2f}ms)"

    logger.log(level, message, extra=log_context)


def configure_logging(level: str | int) -> None:
    """
    Configure root logging for command-line use.

    Args:
        level: Log level name or number
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
