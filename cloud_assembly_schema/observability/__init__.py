"""
Observability components.

Provides structured logging with manifest context.
"""

from .logging import (
    ContextualLoggerAdapter,
    clear_manifest_context,
    configure_logging,
    get_logger,
    get_logging_context,
    log_operation,
    set_manifest_context,
)

__all__ = [
    "set_manifest_context",
    "clear_manifest_context",
    "get_logging_context",
    "ContextualLoggerAdapter",
    "get_logger",
    "log_operation",
    "configure_logging",
]
