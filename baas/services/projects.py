# baas/services/projects.py
"""Repository operations for projects."""
from __future__ import annotations

from typing import List

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from baas.core.errors import NotFound
from baas.db.models import Api, Project, generate_short_id, utcnow
from baas.schemas.project import CreateProjectRequest, UpdateProjectRequest

from .utils import apply_non_empty, storage_guard

PROJECT_NOT_FOUND = "Project not found"
UPDATABLE_FIELDS = ("name", "description", "database_url", "database_type")


def _not_found(project_id: str) -> NotFound:
    return NotFound(f"Project with ID '{project_id}' does not exist", error=PROJECT_NOT_FOUND)


def ensure_project(db: Session, project_id: str) -> Project:
    """Load the project row alone (no APIs); NotFound if it does not exist."""
    with storage_guard(db, "Failed to find project"):
        project = db.get(Project, project_id)
    if project is None:
        raise _not_found(project_id)
    return project


def create_project(db: Session, payload: CreateProjectRequest) -> Project:
    now = utcnow()
    project = Project(
        id=generate_short_id(),
        name=payload.name,
        description=payload.description,
        database_url=payload.database_url,
        database_type=payload.database_type,
        status="active",
        created_at=now,
        updated_at=now,
        apis=[],
    )
    with storage_guard(db, "Failed to create project"):
        db.add(project)
        db.commit()

    logger.info("Created project {} ({})", project.id, project.name)
    return project


def get_project(db: Session, project_id: str) -> Project:
    stmt = (
        select(Project)
        .options(selectinload(Project.apis))
        .where(Project.id == project_id)
    )
    with storage_guard(db, "Failed to get project"):
        project = db.scalars(stmt).first()
    if project is None:
        raise _not_found(project_id)
    return project


def list_projects(db: Session) -> List[Project]:
    stmt = select(Project).options(selectinload(Project.apis)).order_by(Project.created_at)
    with storage_guard(db, "Failed to list projects"):
        return list(db.scalars(stmt).all())


def update_project(db: Session, project_id: str, payload: UpdateProjectRequest) -> Project:
    project = get_project(db, project_id)

    changed = apply_non_empty(project, payload, UPDATABLE_FIELDS)
    project.updated_at = utcnow()

    with storage_guard(db, "Failed to update project"):
        db.commit()

    logger.info("Updated project {} (fields: {})", project_id, ", ".join(changed) or "none")
    return project


def delete_project(db: Session, project_id: str) -> int:
    """
    Delete the project's APIs, then the project, as one transaction.

    Returns the number of API rows removed.
    """
    with storage_guard(db, "Failed to delete project APIs"):
        removed_apis = db.execute(
            delete(Api).where(Api.project_id == project_id)
        ).rowcount

    with storage_guard(db, "Failed to delete project"):
        result = db.execute(delete(Project).where(Project.id == project_id))
        if result.rowcount == 0:
            db.rollback()
            raise _not_found(project_id)
        db.commit()

    logger.info("Deleted project {} and {} API(s)", project_id, removed_apis)
    return removed_apis
