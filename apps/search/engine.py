"""
Content search

Case-insensitive substring matching across projects and published blog
posts. Results are unranked and come back in the store's natural order.
Nothing is indexed, so every search scans both tables.
"""
import logging
from typing import List, NamedTuple, Union

from sqlalchemy import or_
from sqlalchemy.orm import Session

from apps.blog.models import BlogPost
from apps.projects.models import Project
from apps.search.schemas import SearchType

logger = logging.getLogger(__name__)

PROJECT_SEARCH_COLUMNS = (Project.title, Project.description, Project.tech_stack)
POST_SEARCH_COLUMNS = (BlogPost.title, BlogPost.content, BlogPost.excerpt, BlogPost.tags)


class SearchResults(NamedTuple):
    projects: List[Project]
    posts: List[BlogPost]


def _contains_any(columns, query: str):
    # autoescape makes % and _ in the query match literally
    return or_(*(column.icontains(query, autoescape=True) for column in columns))


def search_projects(db: Session, query: str) -> List[Project]:
    """Projects whose title, description or tech stack contains the query."""
    return db.query(Project).filter(_contains_any(PROJECT_SEARCH_COLUMNS, query)).all()


def search_posts(db: Session, query: str) -> List[BlogPost]:
    """Published posts whose title, content, excerpt or tags contain the query."""
    return (
        db.query(BlogPost)
        .filter(
            BlogPost.is_published.is_(True),
            _contains_any(POST_SEARCH_COLUMNS, query),
        )
        .all()
    )


def search_content(
    db: Session,
    query: str,
    content_type: Union[SearchType, str] = SearchType.ALL,
) -> SearchResults:
    """
    Search projects and/or published posts.

    A collection excluded by `content_type` is returned empty and its table
    is not queried.
    """
    content_type = SearchType(content_type)

    projects: List[Project] = []
    posts: List[BlogPost] = []

    try:
        if content_type in (SearchType.ALL, SearchType.PROJECTS):
            projects = search_projects(db, query)

        if content_type in (SearchType.ALL, SearchType.POSTS):
            posts = search_posts(db, query)

    except Exception as e:
        logger.error(f"Content search failed: {e}", exc_info=True)
        raise

    logger.debug(
        f"Search '{query}' ({content_type.value}): "
        f"{len(projects)} projects, {len(posts)} posts"
    )
    return SearchResults(projects=projects, posts=posts)
