"""
Core domain module.

Contains the exception hierarchy and the profile update result types.
"""

from user_documents.core.exceptions import UserDocumentsException, UserNotFoundError
from user_documents.core.results import (
    ManagerRejection,
    ProfileRejected,
    ProfileUpdated,
    ProfileUpdateResult,
)

__all__ = [
    # Exceptions
    "UserDocumentsException",
    "UserNotFoundError",
    # Results
    "ManagerRejection",
    "ProfileRejected",
    "ProfileUpdated",
    "ProfileUpdateResult",
]
