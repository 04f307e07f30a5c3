"""
Pydantic schemas for procedure inputs and serialized records.

Each content type has a `*Create` input, a partial `*Update` input (fields
left out are not written, explicit nulls are) and a response model read from
ORM attributes.
"""

from .pages import PageBase, PageCreate, PageUpdate, Page, SlugLookup
from .blog_posts import BlogPostBase, BlogPostCreate, BlogPostUpdate, BlogPost
from .contact_submissions import ContactSubmissionCreate, ContactSubmission, ContactSubmissionId
from .features import FeatureBase, FeatureCreate, FeatureUpdate, Feature

__all__ = [
    # Pages
    "PageBase",
    "PageCreate",
    "PageUpdate",
    "Page",
    "SlugLookup",
    # Blog posts
    "BlogPostBase",
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogPost",
    # Contact submissions
    "ContactSubmissionCreate",
    "ContactSubmission",
    "ContactSubmissionId",
    # Features
    "FeatureBase",
    "FeatureCreate",
    "FeatureUpdate",
    "Feature",
]
