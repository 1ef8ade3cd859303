"""Shared API response models."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Bare acknowledgement."""

    success: bool


class CreatedResponse(BaseModel):
    """Acknowledgement carrying the new record's id."""

    success: bool
    id: str
