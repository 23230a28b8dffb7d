"""
User ORM model.

Represents an application account with profile fields, role, and an
optional self-referential line manager.

Dependencies: sqlalchemy, user_documents.boundary.db.base
System role: User persistence for profile and role management
"""

import enum
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from user_documents.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class UserRole(str, enum.Enum):
    """
    Role values assigned across the application.

    The role column is a plain string; only MANAGER carries meaning
    inside this package (line-manager validation).
    """

    SUPER_ADMIN = "super_admin"
    TRAVEL_ADMIN = "travel_admin"
    TRAVEL_TEAM_MEMBER = "travel_team_member"
    MANAGER = "manager"
    REQUESTER = "requester"


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: Integer primary key
        email: Unique login address
        password: Password hash; never returned from profile updates
        first_name, last_name, birth_date, gender: Personal details
        residence_address, phone_number, department: Contact and work details
        preferred_language, preferred_currency: Travel preferences
        profile_picture: URL of the uploaded avatar
        is_verified: Whether the email address was confirmed
        role: Role name (see UserRole)
        last_login: Timestamp of the last successful email lookup at sign-in
        remember: "Remember my profile details" flag
        line_manager_id: Foreign key to the user this user reports to

    Relationships:
        line_manager: Many-to-one self reference via line_manager_id
        documents: Documents owned by this user
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    residence_address: Mapped[str | None] = mapped_column(String(512), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    preferred_language: Mapped[str | None] = mapped_column(String(50), nullable=True)
    preferred_currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_picture: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    role: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=UserRole.REQUESTER.value,
    )
    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    remember: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    line_manager_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    line_manager = relationship(
        "UserModel",
        remote_side="UserModel.id",
        foreign_keys=[line_manager_id],
    )
    documents = relationship(
        "DocumentModel",
        back_populates="document_owner",
        foreign_keys="DocumentModel.user_id",
        cascade="all, delete-orphan",
    )
