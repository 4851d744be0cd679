"""
Pydantic schemas for Search API.
"""
from enum import Enum
from pydantic import BaseModel, Field

from apps.projects.schemas import ProjectResponse
from apps.blog.schemas import BlogPostResponse


class SearchType(str, Enum):
    """Which content collections a search covers."""
    ALL = "all"
    PROJECTS = "projects"
    POSTS = "posts"


class SearchResponse(BaseModel):
    """Both collections are always present, possibly empty."""
    projects: list[ProjectResponse] = Field(default_factory=list)
    posts: list[BlogPostResponse] = Field(default_factory=list)
