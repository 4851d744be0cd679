"""
Text helpers shared by the content services
"""
import re
from typing import Optional

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    Derive a URL-safe slug from a title.

    Lower-cases the title, collapses every run of characters outside
    [a-z0-9] into a single hyphen and trims hyphens from both ends:

        >>> slugify("How to Build APIs with Node.js & TypeScript!")
        'how-to-build-apis-with-node-js-typescript'

    Uniqueness is not guaranteed here; the blog_posts table enforces it.
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def split_comma_list(value: Optional[str]) -> list[str]:
    """Split a comma-delimited field ("React, Python, ") into trimmed entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


# Primary keys are 32-bit Integer columns
MAX_ID = 2**31 - 1


def is_valid_id(value) -> bool:
    """True for an int (not a bool) that can name a stored row."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_ID
