"""
Projects repository

Ordering, creation and partial-update rules for portfolio projects.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from apps.shared.database import utcnow
from apps.shared.errors import NotFoundError
from apps.shared.sequence import next_in_sequence
from apps.shared.utils import is_valid_id
from apps.projects.models import Project

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "description",
    "tech_stack",
    "project_url",
    "github_url",
    "image_url",
    "is_featured",
    "display_order",
)

OPTIONAL_TEXT_FIELDS = ("tech_stack", "project_url", "github_url", "image_url")


def _ordered(query):
    # Presentation order; created_at breaks display_order ties
    return query.order_by(Project.display_order.asc(), Project.created_at.asc(), Project.id.asc())


def list_projects(db: Session) -> List[Project]:
    """All projects in presentation order."""
    return _ordered(db.query(Project)).all()


def list_featured_projects(db: Session) -> List[Project]:
    """Featured projects in presentation order."""
    return _ordered(db.query(Project).filter(Project.is_featured.is_(True))).all()


def get_project(db: Session, project_id: int) -> Project:
    """
    Load a project by id.

    Raises:
        NotFoundError: If no project has that id
    """
    project = None
    if is_valid_id(project_id):
        project = db.get(Project, project_id)

    if project is None:
        logger.warning(f"Project {project_id} not found")
        raise NotFoundError("Project", project_id)

    return project


def create_project(db: Session, data: Dict[str, Any]) -> Project:
    """
    Create a project.

    When display_order is not given the project is appended after the
    current last one (max + 1, or 1 for the first project). The lookup and
    the insert share one transaction.
    """
    try:
        display_order = data.get("display_order")
        if display_order is None:
            display_order = next_in_sequence(db, Project.display_order)

        now = utcnow()
        project = Project(
            title=data["title"],
            description=data["description"],
            is_featured=bool(data.get("is_featured", False)),
            display_order=display_order,
            created_at=now,
            updated_at=now,
            **{field: data.get(field) or None for field in OPTIONAL_TEXT_FIELDS},
        )
        db.add(project)
        db.commit()
        db.refresh(project)

    except Exception as e:
        db.rollback()
        logger.error(f"Project creation failed: {e}", exc_info=True)
        raise

    logger.info(f"Created project {project.id} with display order {project.display_order}")
    return project


def update_project(db: Session, project_id: int, data: Dict[str, Any]) -> Project:
    """
    Apply a partial update to a project.

    Only keys present in `data` are written (None clears nullable columns).
    updated_at is refreshed even when `data` is empty.

    Raises:
        NotFoundError: If no project has that id
    """
    project = get_project(db, project_id)

    try:
        for key, value in data.items():
            if key in UPDATABLE_FIELDS:
                setattr(project, key, value)
        project.updated_at = utcnow()

        db.commit()
        db.refresh(project)

    except Exception as e:
        db.rollback()
        logger.error(f"Project update failed: {e}", exc_info=True)
        raise

    logger.info(f"Updated project {project_id}")
    return project


def delete_project(db: Session, project_id: int) -> None:
    """
    Delete a project.

    Raises:
        NotFoundError: If no project has that id
    """
    project = get_project(db, project_id)

    try:
        db.delete(project)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Project deletion failed: {e}", exc_info=True)
        raise

    logger.info(f"Deleted project {project_id}")
