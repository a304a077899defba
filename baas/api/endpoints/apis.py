# baas/api/endpoints/apis.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from baas.db.session import get_db
from baas.schemas.api import (
    ApiDetail,
    ApiEnvelope,
    ApiList,
    ApiOut,
    CreateApiRequest,
    UpdateApiRequest,
)
from baas.schemas.common import ErrorOut, MessageOut
from baas.services import apis as api_service

router = APIRouter()

ERRORS = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}


async def raw_body(request: Request) -> bytes:
    return await request.body()


@router.post(
    "/{project_id}/apis",
    response_model=ApiEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=ERRORS,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CreateApiRequest.model_json_schema()}
            },
        }
    },
)
def create_api_for_project(
    project_id: str,
    payload: bytes = Depends(raw_body),
    db: Session = Depends(get_db),
):
    # body is decoded and validated by the service, after the project lookup
    api = api_service.create_api_for_project(db, project_id, payload)
    return ApiEnvelope(message="API created successfully", api=ApiOut.model_validate(api))


@router.get(
    "/{project_id}/apis",
    response_model=ApiList,
    responses={404: ERRORS[404], 500: ERRORS[500]},
)
def list_apis(project_id: str, db: Session = Depends(get_db)):
    apis = api_service.list_apis(db, project_id)
    return ApiList(apis=[ApiOut.model_validate(a) for a in apis], total=len(apis))


@router.get(
    "/{project_id}/apis/{api_id}",
    response_model=ApiDetail,
    responses={404: ERRORS[404], 500: ERRORS[500]},
)
def get_api(project_id: str, api_id: str, db: Session = Depends(get_db)):
    api = api_service.get_api(db, project_id, api_id)
    return ApiDetail(api=ApiOut.model_validate(api))


@router.put("/{project_id}/apis/{api_id}", response_model=ApiEnvelope, responses=ERRORS)
def update_api(
    project_id: str,
    api_id: str,
    payload: UpdateApiRequest,
    db: Session = Depends(get_db),
):
    api = api_service.update_api(db, project_id, api_id, payload)
    return ApiEnvelope(message="API updated successfully", api=ApiOut.model_validate(api))


@router.delete(
    "/{project_id}/apis/{api_id}",
    response_model=MessageOut,
    responses={404: ERRORS[404], 500: ERRORS[500]},
)
def delete_api(project_id: str, api_id: str, db: Session = Depends(get_db)):
    api_service.delete_api(db, project_id, api_id)
    return MessageOut(message="API deleted successfully")
