"""
Pydantic schemas for Projects API.

Defines request/response models with validation.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from apps.shared.schemas import HttpUrlStr, reject_null


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    tech_stack: Optional[str] = None
    project_url: Optional[HttpUrlStr] = None
    github_url: Optional[HttpUrlStr] = None
    image_url: Optional[HttpUrlStr] = None
    is_featured: bool = False
    # Omitted -> appended after the current last project
    display_order: Optional[int] = None


class ProjectUpdate(BaseModel):
    """
    Schema for updating a project. All fields optional.

    Omitted fields are left unchanged; null clears the nullable columns.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    tech_stack: Optional[str] = None
    project_url: Optional[HttpUrlStr] = None
    github_url: Optional[HttpUrlStr] = None
    image_url: Optional[HttpUrlStr] = None
    is_featured: Optional[bool] = None
    display_order: Optional[int] = None

    @field_validator("title", "description", "is_featured", "display_order")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class ProjectResponse(BaseModel):
    """Schema for project responses."""
    id: int
    title: str
    description: str
    tech_stack: Optional[str] = None
    tech_stack_list: list[str] = Field(default_factory=list)
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    image_url: Optional[str] = None
    is_featured: bool
    display_order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
