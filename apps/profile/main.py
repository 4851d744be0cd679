"""
Profile API

Read and upsert the portfolio owner's "about me" profile.
"""
import logging
from typing import Optional
from fastapi import FastAPI, APIRouter, Depends
from sqlalchemy.orm import Session

from apps.shared.database import get_db, Base, engine, check_db_connection, utcnow
from apps.shared.cors import setup_cors
from apps.shared.errors import register_exception_handlers
from apps.profile import repository
from apps.profile.models import AboutMe
from apps.profile.schemas import ProfileUpdate, ProfileResponse

logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine, tables=[AboutMe.__table__])

app = FastAPI(
    title="Profile API",
    version="1.0.0",
    description="Portfolio owner profile",
    docs_url="/profile/docs",
    openapi_url="/profile/openapi.json",
)

setup_cors(app)
register_exception_handlers(app)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/health")
def health():
    """Health check endpoint."""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "profile",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": utcnow().isoformat(),
    }


@router.get("", response_model=Optional[ProfileResponse])
def get_profile(db: Session = Depends(get_db)):
    """Get the profile, or null if it has not been created yet."""
    return repository.get_profile(db)


@router.put("", response_model=ProfileResponse)
def upsert_profile(profile_data: ProfileUpdate, db: Session = Depends(get_db)):
    """
    Create or update the profile.
    Only fields present in the body are applied; null clears a contact field.
    """
    return repository.upsert_profile(db, profile_data.model_dump(exclude_unset=True))


app.include_router(router)
