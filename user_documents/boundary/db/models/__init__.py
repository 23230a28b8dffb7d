"""
Database models package.

Exports:
  - UserModel, UserRole: User ORM model and known role values
  - DocumentModel: Uploaded document ORM model

Dependencies: sqlalchemy, user_documents.boundary.db.base
System role: Database model definitions for domain entities
"""

from user_documents.boundary.db.models.user_model import UserModel, UserRole
from user_documents.boundary.db.models.document_model import DocumentModel

__all__ = [
    "UserModel",
    "UserRole",
    "DocumentModel",
]
