"""
Observability module.

Provides logging configuration and safe structured-logging helpers.
"""

from user_documents.observability.log_utils import log_with_context, safe_log_value
from user_documents.observability.logger import configure_logging

__all__ = ["configure_logging", "log_with_context", "safe_log_value"]
