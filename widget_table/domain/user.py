"""SQLAlchemy ORM model for Users."""

from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from widget_table.db.base import Base
from widget_table.domain.mixins import TimestampMixin

# Soft-deleted users release their email address
_ACTIVE = text("deleted_at IS NULL")


class User(Base, TimestampMixin):
    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_active",
            "email",
            unique=True,
            sqlite_where=_ACTIVE,
            postgresql_where=_ACTIVE,
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # "admin" | "instructor" | "student"
    role: Mapped[str] = mapped_column(String(50), default="student", nullable=False)

    courses: Mapped[List["Course"]] = relationship(
        back_populates="user", lazy="noload"
    )
