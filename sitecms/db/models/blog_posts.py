from sqlalchemy import Column, Integer, Text, Boolean, DateTime, Index, false
from .base import Base, now_utc


class BlogPost(Base):
    __tablename__ = 'blog_posts'
    id = Column(Integer, primary_key=True)
    slug = Column(Text, nullable=False, unique=True)
    title = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    featured_image_url = Column(Text, nullable=True)
    # SEO
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)
    is_published = Column(Boolean, nullable=False, default=False, server_default=false())
    # Set by the caller; independent of is_published
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_blog_posts_published', 'is_published', 'published_at'),
        {'sqlite_autoincrement': True},
    )
