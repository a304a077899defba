# baas/db/models/api.py
from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, ShortIDMixin, TimestampMixin, SHORT_ID_LENGTH


class Api(ShortIDMixin, TimestampMixin, Base):
    """Metadata of one endpoint exposed for a project (path, method, backing table)."""

    __tablename__ = "apis"

    project_id: Mapped[str] = mapped_column(
        String(SHORT_ID_LENGTH),
        ForeignKey("projects.id"),
        index=True,
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    path: Mapped[str] = mapped_column(String(500), nullable=False)
    method: Mapped[str] = mapped_column(String(10), nullable=False)
    table_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), default="active", nullable=False)

    project: Mapped["Project"] = relationship(back_populates="apis")
