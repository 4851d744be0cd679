"""
Profile database model

Single-row "about me" table. Only one row should ever exist, with id=1.
"""
from sqlalchemy import Column, Integer, Text, DateTime

from apps.shared.database import Base, utcnow

# Singleton row id
PROFILE_ID = 1


class AboutMe(Base):
    """
    The portfolio owner's profile (single user mode).

    Created implicitly by the first upsert; there is no delete.
    """
    __tablename__ = "about_me"

    id = Column(Integer, primary_key=True)  # Always 1
    name = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    bio = Column(Text, nullable=False)
    email = Column(Text)
    github_url = Column(Text)
    linkedin_url = Column(Text)
    website_url = Column(Text)
    profile_image_url = Column(Text)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<AboutMe id={self.id} name={self.name!r}>"
