# baas/schemas/common.py
from pydantic import BaseModel, ConfigDict


class AppBaseModel(BaseModel):
    """Parent of every request/response model."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
    )


class MessageOut(AppBaseModel):
    message: str


class ErrorOut(AppBaseModel):
    error: str
    message: str


class HealthOut(AppBaseModel):
    status: str
    service: str
    version: str
