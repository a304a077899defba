# baas/schemas/project.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .api import ApiOut
from .common import AppBaseModel


class CreateProjectRequest(AppBaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    database_url: str = Field(min_length=1)
    database_type: str = Field(min_length=1)


class UpdateProjectRequest(AppBaseModel):
    """Partial update: omitted or empty fields keep their stored value."""

    name: Optional[str] = None
    description: Optional[str] = None
    database_url: Optional[str] = None
    database_type: Optional[str] = None


class ProjectOut(AppBaseModel):
    id: str
    name: str
    description: Optional[str] = None
    database_url: str
    database_type: str
    status: str
    apis: List[ApiOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProjectEnvelope(AppBaseModel):
    message: str
    project: ProjectOut


class ProjectDetail(AppBaseModel):
    project: ProjectOut


class ProjectList(AppBaseModel):
    projects: List[ProjectOut]
    total: int
