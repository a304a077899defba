# baas/api/endpoints/projects.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from baas.db.session import get_db
from baas.schemas.common import ErrorOut, MessageOut
from baas.schemas.project import (
    CreateProjectRequest,
    ProjectDetail,
    ProjectEnvelope,
    ProjectList,
    ProjectOut,
    UpdateProjectRequest,
)
from baas.services import projects as project_service

router = APIRouter()

ERRORS = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}


@router.post(
    "",
    response_model=ProjectEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={400: ERRORS[400], 500: ERRORS[500]},
)
def create_project(payload: CreateProjectRequest, db: Session = Depends(get_db)):
    project = project_service.create_project(db, payload)
    return ProjectEnvelope(
        message="Project created successfully",
        project=ProjectOut.model_validate(project),
    )


@router.get("", response_model=ProjectList, responses={500: ERRORS[500]})
def list_projects(db: Session = Depends(get_db)):
    projects = project_service.list_projects(db)
    return ProjectList(
        projects=[ProjectOut.model_validate(p) for p in projects],
        total=len(projects),
    )


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    responses={404: ERRORS[404], 500: ERRORS[500]},
)
def get_project(project_id: str, db: Session = Depends(get_db)):
    project = project_service.get_project(db, project_id)
    return ProjectDetail(project=ProjectOut.model_validate(project))


@router.put("/{project_id}", response_model=ProjectEnvelope, responses=ERRORS)
def update_project(
    project_id: str,
    payload: UpdateProjectRequest,
    db: Session = Depends(get_db),
):
    project = project_service.update_project(db, project_id, payload)
    return ProjectEnvelope(
        message="Project updated successfully",
        project=ProjectOut.model_validate(project),
    )


@router.delete(
    "/{project_id}",
    response_model=MessageOut,
    responses={404: ERRORS[404], 500: ERRORS[500]},
)
def delete_project(project_id: str, db: Session = Depends(get_db)):
    project_service.delete_project(db, project_id)
    return MessageOut(message="Project deleted successfully")
