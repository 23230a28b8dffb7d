"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from user_documents.boundary.db.CRUD import user_crud, document_crud

    user = await user_crud.get_by_email(db, "jane@example.com")
"""

from user_documents.boundary.db.CRUD.base_crud import BaseCRUD
from user_documents.boundary.db.CRUD.user_crud import PROFILE_FIELDS, UserCRUD, user_crud
from user_documents.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "BaseCRUD",
    "PROFILE_FIELDS",
    "UserCRUD",
    "user_crud",
    "DocumentCRUD",
    "document_crud",
]
