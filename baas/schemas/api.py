# baas/schemas/api.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import AppBaseModel


class CreateApiRequest(AppBaseModel):
    name: str = Field(min_length=1)
    path: str = Field(min_length=1)
    method: str = Field(min_length=1)
    table_name: str = Field(min_length=1)


class UpdateApiRequest(AppBaseModel):
    """Partial update: omitted or empty fields keep their stored value."""

    name: Optional[str] = None
    path: Optional[str] = None
    method: Optional[str] = None
    table_name: Optional[str] = None


class ApiOut(AppBaseModel):
    id: str
    project_id: str
    name: str
    path: str
    method: str
    table_name: str
    status: str
    created_at: datetime
    updated_at: datetime


class ApiEnvelope(AppBaseModel):
    message: str
    api: ApiOut


class ApiDetail(AppBaseModel):
    api: ApiOut


class ApiList(AppBaseModel):
    apis: List[ApiOut]
    total: int
