"""
Search API

Free-text search across projects and published blog posts.
"""
import logging
from fastapi import FastAPI, APIRouter, Depends, Query
from sqlalchemy.orm import Session

from apps.shared.database import get_db, Base, engine, check_db_connection, utcnow
from apps.shared.cors import setup_cors
from apps.shared.errors import register_exception_handlers
from apps.blog.models import BlogPost
from apps.projects.models import Project
from apps.search.engine import search_content
from apps.search.schemas import SearchType, SearchResponse

logger = logging.getLogger(__name__)

# Create the tables this service reads, so it can run on its own
Base.metadata.create_all(bind=engine, tables=[Project.__table__, BlogPost.__table__])

app = FastAPI(
    title="Search API",
    version="1.0.0",
    description="Substring search over projects and published posts",
    docs_url="/search/docs",
    openapi_url="/search/openapi.json",
)

setup_cors(app)
register_exception_handlers(app)

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/health")
def health():
    """Health check endpoint."""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "search",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": utcnow().isoformat(),
    }


@router.get("", response_model=SearchResponse)
def search(
    query: str = Query(..., min_length=1),
    type: SearchType = Query(SearchType.ALL),
    db: Session = Depends(get_db),
):
    """
    Search content. Matching is case-insensitive substring containment.
    type=projects or type=posts limits the search to one collection.
    """
    results = search_content(db, query, type)
    return {"projects": results.projects, "posts": results.posts}


app.include_router(router)
