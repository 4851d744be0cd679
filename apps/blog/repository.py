"""
Blog repository

Slug derivation, publication state and partial updates for blog posts.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from apps.shared.database import utcnow
from apps.shared.errors import ConflictError, NotFoundError
from apps.shared.utils import is_valid_id, slugify
from apps.blog.models import BlogPost

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "content",
    "excerpt",
    "is_published",
    "tags",
    "reading_time_minutes",
)


def list_published_posts(db: Session) -> List[BlogPost]:
    """Published posts, newest first; posts without published_at come last."""
    return (
        db.query(BlogPost)
        .filter(BlogPost.is_published.is_(True))
        .order_by(BlogPost.published_at.desc().nullslast(), BlogPost.id.desc())
        .all()
    )


def get_published_post_by_slug(db: Session, slug: str) -> Optional[BlogPost]:
    """Return the post with this slug, or None if it is missing or unpublished."""
    return (
        db.query(BlogPost)
        .filter(BlogPost.slug == slug, BlogPost.is_published.is_(True))
        .first()
    )


def get_post(db: Session, post_id: int) -> BlogPost:
    """
    Load any post (published or not) by id.

    Raises:
        NotFoundError: If no post has that id
    """
    post = None
    if is_valid_id(post_id):
        post = db.get(BlogPost, post_id)

    if post is None:
        logger.warning(f"Blog post {post_id} not found")
        raise NotFoundError("Blog post", post_id)

    return post


def _ensure_slug_available(db: Session, slug: str, post_id: Optional[int] = None) -> None:
    query = db.query(BlogPost.id).filter(BlogPost.slug == slug)
    if post_id is not None:
        query = query.filter(BlogPost.id != post_id)

    if query.first() is not None:
        logger.warning(f"Slug '{slug}' is already taken")
        raise ConflictError(f"Blog post with slug '{slug}' already exists")


def _commit(db: Session, slug: str) -> None:
    # A concurrent writer can still claim the slug after the pre-check
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Slug '{slug}' collided on commit: {e.orig}")
        raise ConflictError(f"Blog post with slug '{slug}' already exists") from e


def create_post(db: Session, data: Dict[str, Any]) -> BlogPost:
    """
    Create a blog post.

    The slug is derived from the title. Publishing on creation stamps
    published_at with the current time.

    Raises:
        ConflictError: If another post already has the derived slug
    """
    slug = slugify(data["title"])
    is_published = bool(data.get("is_published", False))
    now = utcnow()

    try:
        _ensure_slug_available(db, slug)

        post = BlogPost(
            title=data["title"],
            slug=slug,
            content=data["content"],
            excerpt=data.get("excerpt") or None,
            is_published=is_published,
            tags=data.get("tags") or None,
            reading_time_minutes=data.get("reading_time_minutes") or None,
            created_at=now,
            updated_at=now,
            published_at=now if is_published else None,
        )
        db.add(post)
        _commit(db, slug)
        db.refresh(post)

    except ConflictError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Blog post creation failed: {e}", exc_info=True)
        raise

    logger.info(f"Created blog post {post.id} ({post.slug}), published={post.is_published}")
    return post


def update_post(db: Session, post_id: int, data: Dict[str, Any]) -> BlogPost:
    """
    Apply a partial update to a blog post.

    - title present: slug is re-derived from it
    - is_published present: published_at becomes now (true) or None (false),
      even if the post was already in that state
    - other keys present: written as given (None clears)
    - updated_at is always refreshed

    Raises:
        NotFoundError: If no post has that id
        ConflictError: If the new title's slug belongs to another post
    """
    post = get_post(db, post_id)
    changes = {key: value for key, value in data.items() if key in UPDATABLE_FIELDS}
    now = utcnow()

    try:
        if "title" in changes:
            slug = slugify(changes["title"])
            _ensure_slug_available(db, slug, post_id=post.id)
            post.slug = slug

        if "is_published" in changes:
            post.published_at = now if changes["is_published"] else None

        for key, value in changes.items():
            setattr(post, key, value)
        post.updated_at = now

        _commit(db, post.slug)
        db.refresh(post)

    except ConflictError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Blog post update failed: {e}", exc_info=True)
        raise

    logger.info(f"Updated blog post {post_id}")
    return post


def delete_post(db: Session, post_id: int) -> None:
    """
    Delete a blog post.

    Raises:
        NotFoundError: If no post has that id
    """
    post = get_post(db, post_id)

    try:
        db.delete(post)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Blog post deletion failed: {e}", exc_info=True)
        raise

    logger.info(f"Deleted blog post {post_id}")
