# baas/services/utils.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from baas.core.errors import InternalError


@contextmanager
def storage_guard(db: Session, summary: str) -> Iterator[None]:
    """Roll back and re-raise any SQLAlchemy failure as InternalError(summary)."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("{}: {}: {}", summary, type(e).__name__, e)
        raise InternalError(str(e), error=summary) from e


def apply_non_empty(row: Any, payload: BaseModel, fields: Iterable[str]) -> List[str]:
    """
    Copy every field that is present and non-empty in `payload` onto `row`.

    Returns the names of the fields that were written.
    """
    changed: List[str] = []
    for name in fields:
        value = getattr(payload, name, None)
        if value is None or value == "":
            continue
        setattr(row, name, value)
        changed.append(name)
    return changed
