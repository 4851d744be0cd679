"""
Blog API

Published post listing, lookup by slug, and post management.
"""
import logging
from typing import Optional
from fastapi import FastAPI, APIRouter, Depends, Response
from sqlalchemy.orm import Session

from apps.shared.database import get_db, Base, engine, check_db_connection, utcnow
from apps.shared.cors import setup_cors
from apps.shared.errors import register_exception_handlers
from apps.blog import repository
from apps.blog.models import BlogPost
from apps.blog.schemas import BlogPostCreate, BlogPostUpdate, BlogPostResponse

logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine, tables=[BlogPost.__table__])

app = FastAPI(
    title="Blog Service",
    version="1.0.0",
    description="Blog posts with publication state and slug lookup",
    docs_url="/blog/docs",
    openapi_url="/blog/openapi.json",
)

# Setup CORS from shared configuration
setup_cors(app)
register_exception_handlers(app)

# Router setup
router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("/health")
def health():
    """Health check endpoint - returns service status"""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "blog",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": utcnow().isoformat(),
    }


@router.get("/posts", response_model=list[BlogPostResponse])
def list_published_posts(db: Session = Depends(get_db)):
    """List published posts, newest first."""
    return repository.list_published_posts(db)


@router.get("/posts/{slug}", response_model=Optional[BlogPostResponse])
def get_published_post_by_slug(slug: str, db: Session = Depends(get_db)):
    """Get a published post by slug; null when missing or unpublished."""
    return repository.get_published_post_by_slug(db, slug)


@router.post("/posts", response_model=BlogPostResponse, status_code=201)
def create_post(post_data: BlogPostCreate, db: Session = Depends(get_db)):
    """Create a post. The slug is derived from the title."""
    return repository.create_post(db, post_data.model_dump())


@router.put("/posts/{post_id}", response_model=BlogPostResponse)
def update_post(
    post_id: int,
    post_data: BlogPostUpdate,
    db: Session = Depends(get_db),
):
    """Update a post. Only provided fields are changed."""
    return repository.update_post(db, post_id, post_data.model_dump(exclude_unset=True))


@router.delete("/posts/{post_id}", status_code=204)
def delete_post(post_id: int, db: Session = Depends(get_db)):
    """Delete a post."""
    repository.delete_post(db, post_id)
    return Response(status_code=204)


app.include_router(router)
