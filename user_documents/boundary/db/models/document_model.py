"""
Document ORM model.

Represents an uploaded travel document (passport scan, visa, etc.) and
its verification state.

Dependencies: sqlalchemy, user_documents.boundary.db.base
System role: Document persistence for upload and verification tracking
"""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from user_documents.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class DocumentModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Document ORM model.

    Lifecycle: uploaded unverified by its owner, then verified once by a
    travel admin whose id is recorded in travel_admin_id.

    Attributes:
        id: Integer primary key (descending id = most recent first)
        name: Display name of the document
        url: Storage URL of the uploaded file
        user_id: Owner foreign key (cascade delete)
        verified: Whether an admin approved the document
        travel_admin_id: Verifying admin, null until verified

    Relationships:
        document_owner: Owning UserModel
        admin: Verifying UserModel
    """

    __tablename__ = "documents"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    travel_admin_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    document_owner = relationship(
        "UserModel",
        back_populates="documents",
        foreign_keys=[user_id],
    )
    admin = relationship("UserModel", foreign_keys=[travel_admin_id])
