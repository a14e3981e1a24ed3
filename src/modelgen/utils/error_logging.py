"""Error logging utilities for file generation."""

from typing import Any, Dict, Optional
from modelgen.config.logging import get_logger

logger = get_logger(__name__)


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    operation: Optional[str] = None,
    path: Optional[str] = None,
    log_level: str = "error",
) -> None:
    """
    Log an error with its type, message, context and traceback.

    Args:
        error: The exception that occurred
        context: Additional context dictionary (e.g., {'template': 'model.py.j2'})
        operation: Description of the operation being performed
        path: File the operation was working on
        log_level: Logging level ('error', 'warning', 'critical')
    """
    error_type = type(error).__name__
    error_message = str(error)

    context_parts = []
    if operation:
        context_parts.append(f"Operation: {operation}")
    if path:
        context_parts.append(f"Path: {path}")
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        context_parts.append(f"Context: {context_str}")

    error_msg = f"[{error_type}] {error_message}"
    if context_parts:
        error_msg += " | " + " | ".join(context_parts)

    if log_level.lower() == "critical":
        logger.critical(error_msg, exc_info=True)
    elif log_level.lower() == "warning":
        logger.warning(error_msg, exc_info=True)
    else:
        logger.error(error_msg, exc_info=True)
