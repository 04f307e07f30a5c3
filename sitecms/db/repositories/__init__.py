"""
Per-entity repositories for database access.

Each repository is constructed with the session it should use; they share no
state beyond that handle.
"""

from .pages import PageRepository
from .blog_posts import BlogPostRepository
from .contact_submissions import ContactSubmissionRepository
from .features import FeatureRepository

__all__ = [
    "PageRepository",
    "BlogPostRepository",
    "ContactSubmissionRepository",
    "FeatureRepository",
]
