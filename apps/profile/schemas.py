"""
Pydantic schemas for the Profile API.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from apps.shared.schemas import HttpUrlStr, reject_null


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    Omitted fields are left unchanged; explicit nulls clear the optional
    contact fields.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    bio: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    github_url: Optional[HttpUrlStr] = None
    linkedin_url: Optional[HttpUrlStr] = None
    website_url: Optional[HttpUrlStr] = None
    profile_image_url: Optional[HttpUrlStr] = None

    @field_validator("name", "title", "bio")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class ProfileResponse(BaseModel):
    """Schema for profile responses."""
    id: int
    name: str
    title: str
    bio: str
    email: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    website_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True
