"""
Projects API

CRUD endpoints for portfolio projects.
"""
import logging
from fastapi import FastAPI, APIRouter, Depends, Response
from sqlalchemy.orm import Session

from apps.shared.database import get_db, Base, engine, check_db_connection, utcnow
from apps.shared.cors import setup_cors
from apps.shared.errors import register_exception_handlers
from apps.projects import repository
from apps.projects.models import Project
from apps.projects.schemas import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
)

logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine, tables=[Project.__table__])

app = FastAPI(
    title="Projects API",
    version="1.0.0",
    description="Portfolio projects management",
    docs_url="/projects/docs",
    openapi_url="/projects/openapi.json",
)

# Setup CORS from shared configuration
setup_cors(app)
register_exception_handlers(app)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("/health")
def health():
    """Health check endpoint."""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "projects",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": utcnow().isoformat(),
    }


@router.get("", response_model=list[ProjectResponse])
def list_projects(db: Session = Depends(get_db)):
    """
    List all projects.
    Sorted by display_order (ascending), then by created_at (ascending).
    """
    return repository.list_projects(db)


@router.get("/featured", response_model=list[ProjectResponse])
def list_featured_projects(db: Session = Depends(get_db)):
    """List featured projects (for homepage display), in display order."""
    return repository.list_featured_projects(db)


@router.post("", response_model=ProjectResponse, status_code=201)
def create_project(project_data: ProjectCreate, db: Session = Depends(get_db)):
    """Create a new project. Omitting display_order appends it to the end."""
    return repository.create_project(db, project_data.model_dump())


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    db: Session = Depends(get_db),
):
    """Update an existing project. Only provided fields are changed."""
    return repository.update_project(
        db, project_id, project_data.model_dump(exclude_unset=True)
    )


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    """Delete a project."""
    repository.delete_project(db, project_id)
    return Response(status_code=204)


app.include_router(router)
