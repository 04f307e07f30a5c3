"""
SQLAlchemy models for the site content tables.

Exposes `Base`, `now_utc`, and one ORM class per content type.
"""

from .base import Base, now_utc  # re-export

from .pages import Page
from .blog_posts import BlogPost
from .contact_submissions import ContactSubmission
from .features import Feature

__all__ = [
    # base
    "Base",
    "now_utc",
    # content
    "Page",
    "BlogPost",
    "ContactSubmission",
    "Feature",
]
