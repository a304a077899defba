# baas/db/models/project.py

from __future__ import annotations
from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, ShortIDMixin, TimestampMixin


class Project(ShortIDMixin, TimestampMixin, Base):
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text())
    database_url: Mapped[str] = mapped_column(Text(), nullable=False)
    database_type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="active", nullable=False)

    # children are removed explicitly by the repository before the project row
    apis: Mapped[List["Api"]] = relationship(
        back_populates="project",
        order_by="Api.created_at",
    )
