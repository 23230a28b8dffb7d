"""API-specific dependencies."""

from .dependencies import get_settings_dependency, get_user_document_service

__all__ = [
    "get_settings_dependency",
    "get_user_document_service",
]
