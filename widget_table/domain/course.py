"""SQLAlchemy ORM model for Courses. Every course belongs to one user."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from widget_table.db.base import Base
from widget_table.domain.mixins import TimestampMixin


class Course(Base, TimestampMixin):
    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    credits: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # "draft" | "published" | "archived"
    status: Mapped[str] = mapped_column(String(50), default="draft", nullable=False)

    user: Mapped["User"] = relationship(back_populates="courses", lazy="noload")
