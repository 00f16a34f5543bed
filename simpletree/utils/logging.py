"""
Context-aware logging helpers.

Loggers returned by get_logger carry the language and file being processed,
so every record from one parse can be correlated:
- language, file_path: bound once per parser or plugin
- phase: set per record by log_phase_transition
"""

import logging
from typing import Any, Dict, MutableMapping, Optional


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that injects context fields into all log records.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        """
        Process log message and inject context.

        Per-call extra fields win over the adapter's context. The caller's
        extra dict is left untouched.

        Args:
            msg: Log message
            kwargs: Log kwargs

        Returns:
            Tuple of (message, kwargs) with context injected
        """
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """
    Get a context-aware logger for a module.

    Example:
        logger = get_logger(__name__, language="javascript")
        logger.info("Parsing source")  # Will include language
    """
    base_logger = logging.getLogger(name)
    return ContextLoggerAdapter(base_logger, context)


def log_phase_transition(
    logger: logging.LoggerAdapter,
    phase: str,
    status: str,
    **context: Any
) -> None:
    """
    Log a processing phase transition (start or completion).

    Args:
        logger: Logger to use
        phase: Phase name (e.g., 'parse', 'simplify')
        status: Status ('started' or 'completed')
        **context: Additional context fields
    """
    logger.info(
        f"Phase {status}: {phase}",
        extra={"phase": phase, "status": status, **context}
    )


def log_error_with_context(
    logger: logging.LoggerAdapter,
    message: str,
    error: Exception,
    **context: Any
) -> None:
    """
    Log error with full stack trace and context.

    Args:
        logger: Logger to use
        message: Error message
        error: Exception object
        **context: Additional context fields
    """
    logger.error(
        message,
        extra={"error_type": type(error).__name__, **context},
        exc_info=error
    )
