"""
Blog database models
"""
from sqlalchemy import Column, Integer, Text, Boolean, DateTime, Index

from apps.shared.database import Base, utcnow
from apps.shared.utils import split_comma_list


class BlogPost(Base):
    """
    A blog post.

    slug is derived from the title and must be unique. published_at is set
    exactly when is_published is true; the repository keeps the two in step.
    """
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(Text)
    is_published = Column(Boolean, nullable=False, default=False)
    tags = Column(Text)  # Comma-separated
    reading_time_minutes = Column(Integer)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    published_at = Column(DateTime(timezone=True))

    __table_args__ = (
        Index("ix_blog_posts_published", "is_published", "published_at"),
    )

    @property
    def tag_list(self) -> list[str]:
        """Tags split into individual entries."""
        return split_comma_list(self.tags)

    def __repr__(self):
        return f"<BlogPost id={self.id} slug={self.slug!r} published={self.is_published}>"
