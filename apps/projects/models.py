"""
Projects database models.

Stores portfolio projects with their links and display settings.
"""
from sqlalchemy import Column, Integer, Text, Boolean, DateTime

from apps.shared.database import Base, utcnow
from apps.shared.utils import split_comma_list


class Project(Base):
    """
    Project model for portfolio projects.

    Stores all project data including:
    - Basic info (title, description)
    - Technologies as comma-separated text ("React, Python, PostgreSQL")
    - Links (live project, source repository, image)
    - Display settings (featured, display_order)
    """
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    tech_stack = Column(Text)
    project_url = Column(Text)
    github_url = Column(Text)
    image_url = Column(Text)
    is_featured = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @property
    def tech_stack_list(self) -> list[str]:
        """Technologies split into individual entries."""
        return split_comma_list(self.tech_stack)

    def __repr__(self):
        return f"<Project id={self.id} title={self.title!r} order={self.display_order}>"
