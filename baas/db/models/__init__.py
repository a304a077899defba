# baas/db/models/__init__.py

from .base import Base, ShortIDMixin, TimestampMixin, generate_short_id, utcnow
from .project import Project
from .api import Api

__all__ = [
    "Base", "ShortIDMixin", "TimestampMixin", "generate_short_id", "utcnow",
    "Project", "Api",
]
