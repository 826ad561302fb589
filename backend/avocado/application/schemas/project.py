"""Pydantic DTOs (Data Transfer Objects) for the Project feature."""

from pydantic import BaseModel, Field


class ProjectCreate(BaseModel):
    """Schema for creating a new project: id and timestamp are assigned on create."""

    owner_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200, examples=["Launch"])
    description: str = "New Project"
    icon: str = Field("🥑", max_length=8)
    color: str = Field("green", max_length=40)
