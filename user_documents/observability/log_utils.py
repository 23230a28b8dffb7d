"""
Logging utilities for safe structured logging.

Provides helpers that keep credentials and oversized values out of log records.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

SENSITIVE_KEYS = frozenset({"password", "token", "secret"})
REDACTED = "***"


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Handles lists, dicts, None, and other types safely.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def redact_context(context: dict[str, Any]) -> dict[str, str]:
    """
    Convert a context dict to loggable strings, masking sensitive keys.

    Args:
        context: Arbitrary key-value pairs

    Returns:
        dict[str, str]: Safe context with credentials replaced by ``***``
    """
    return {
        key: REDACTED if key.lower() in SENSITIVE_KEYS else safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    *args: Any,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Context only reaches the record as attributes, so values a reader of
    the plain-text log needs belong in ``args``.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message, %-formatted with ``args``
        *args: Message arguments
        **context: Context dict with arbitrary key-value pairs
    """
    logger.log(level, message, *args, extra=redact_context(context))
