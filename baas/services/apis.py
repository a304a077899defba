# baas/services/apis.py
"""Repository operations for the APIs attached to a project."""
from __future__ import annotations

from typing import Any, List

from loguru import logger
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from baas.core.errors import NotFound, ValidationError, format_validation_errors
from baas.db.models import Api, generate_short_id, utcnow
from baas.schemas.api import CreateApiRequest, UpdateApiRequest

from .projects import ensure_project
from .utils import apply_non_empty, storage_guard

API_NOT_FOUND = "API not found"
UPDATABLE_FIELDS = ("name", "path", "method", "table_name")


def _not_found(project_id: str, api_id: str) -> NotFound:
    return NotFound(
        f"No API with ID '{api_id}' in project '{project_id}'",
        error=API_NOT_FOUND,
    )


def parse_create_request(payload: Any) -> CreateApiRequest:
    """Validate a raw JSON body (bytes/str) or an already decoded object."""
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return CreateApiRequest.model_validate_json(payload)
        return CreateApiRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            format_validation_errors(e.errors()), error="Invalid API request"
        ) from e


def create_api_for_project(db: Session, project_id: str, payload: Any) -> Api:
    """
    Attach a new API to an existing project.

    The parent is checked before the body, so an unknown project answers
    404 even when the body is also invalid.
    """
    ensure_project(db, project_id)
    req = parse_create_request(payload)

    now = utcnow()
    api = Api(
        id=generate_short_id(),
        project_id=project_id,
        name=req.name,
        path=req.path,
        method=req.method,
        table_name=req.table_name,
        status="active",
        created_at=now,
        updated_at=now,
    )
    with storage_guard(db, "Failed to create API config"):
        db.add(api)
        db.commit()

    logger.info("Created API {} {} {} for project {}", api.id, api.method, api.path, project_id)
    return api


def list_apis(db: Session, project_id: str) -> List[Api]:
    ensure_project(db, project_id)
    stmt = select(Api).where(Api.project_id == project_id).order_by(Api.created_at)
    with storage_guard(db, "Failed to list APIs"):
        return list(db.scalars(stmt).all())


def get_api(db: Session, project_id: str, api_id: str) -> Api:
    ensure_project(db, project_id)
    stmt = select(Api).where(Api.id == api_id, Api.project_id == project_id)
    with storage_guard(db, "Failed to get API"):
        api = db.scalars(stmt).first()
    if api is None:
        raise _not_found(project_id, api_id)
    return api


def update_api(db: Session, project_id: str, api_id: str, payload: UpdateApiRequest) -> Api:
    api = get_api(db, project_id, api_id)

    changed = apply_non_empty(api, payload, UPDATABLE_FIELDS)
    api.updated_at = utcnow()

    with storage_guard(db, "Failed to update API"):
        db.commit()

    logger.info("Updated API {} (fields: {})", api_id, ", ".join(changed) or "none")
    return api


def delete_api(db: Session, project_id: str, api_id: str) -> None:
    ensure_project(db, project_id)
    with storage_guard(db, "Failed to delete API"):
        result = db.execute(
            delete(Api).where(Api.id == api_id, Api.project_id == project_id)
        )
        if result.rowcount == 0:
            db.rollback()
            raise _not_found(project_id, api_id)
        db.commit()

    logger.info("Deleted API {} from project {}", api_id, project_id)
