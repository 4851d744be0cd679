"""
Profile repository

Reads and upserts the single "about me" row.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from apps.shared.database import utcnow
from apps.profile.models import AboutMe, PROFILE_ID

logger = logging.getLogger(__name__)

# Used for required fields when the first upsert leaves them out
PROFILE_DEFAULTS = {
    "name": "John Doe",
    "title": "Software Developer",
    "bio": "Passionate developer building amazing things.",
}

PROFILE_FIELDS = (
    "name",
    "title",
    "bio",
    "email",
    "github_url",
    "linkedin_url",
    "website_url",
    "profile_image_url",
)


def get_profile(db: Session) -> Optional[AboutMe]:
    """Return the profile, or None if it has never been created."""
    return db.query(AboutMe).order_by(AboutMe.id).first()


def upsert_profile(db: Session, data: Dict[str, Any]) -> AboutMe:
    """
    Create the profile on first use, otherwise merge the given fields into it.

    `data` holds only the fields the caller explicitly sent (e.g.
    `ProfileUpdate.model_dump(exclude_unset=True)`): a missing key leaves the
    column unchanged and a None value clears it.

    The two branches are kept explicit instead of relying on ON CONFLICT:
    - no row: insert id=1, filling name/title/bio from PROFILE_DEFAULTS
    - row exists: apply the present fields and bump updated_at; with no
      fields at all the stored row is returned untouched
    """
    changes = {key: value for key, value in data.items() if key in PROFILE_FIELDS}

    try:
        profile = get_profile(db)

        if profile is None:
            profile = _create_profile(db, changes)
            if profile is not None:
                return profile
            # Lost the insert race to a concurrent request; merge instead
            profile = get_profile(db)

        if not changes:
            return profile

        for key, value in changes.items():
            setattr(profile, key, value)
        profile.updated_at = utcnow()

        db.commit()
        db.refresh(profile)
        logger.info(f"Updated profile fields: {', '.join(sorted(changes))}")
        return profile

    except Exception as e:
        db.rollback()
        logger.error(f"Profile upsert failed: {e}", exc_info=True)
        raise


def _create_profile(db: Session, changes: Dict[str, Any]) -> Optional[AboutMe]:
    """Insert the singleton row; returns None if another request created it first."""
    values = {field: changes.get(field) for field in PROFILE_FIELDS}
    for field, default in PROFILE_DEFAULTS.items():
        if not values[field]:
            values[field] = default

    profile = AboutMe(id=PROFILE_ID, updated_at=utcnow(), **values)
    db.add(profile)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if get_profile(db) is None:
            raise
        logger.warning("Profile was created concurrently, merging into existing row")
        return None

    db.refresh(profile)
    logger.info("Created profile")
    return profile
