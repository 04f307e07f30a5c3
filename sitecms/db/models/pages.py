from sqlalchemy import Column, Integer, Text, Boolean, DateTime, false
from .base import Base, now_utc


class Page(Base):
    __tablename__ = 'pages'
    id = Column(Integer, primary_key=True)
    slug = Column(Text, nullable=False, unique=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    # SEO
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)
    is_published = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    __table_args__ = (
        {'sqlite_autoincrement': True},
    )
