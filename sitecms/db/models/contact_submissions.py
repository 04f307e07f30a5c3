from sqlalchemy import Column, Integer, Text, Boolean, DateTime, Index, false
from .base import Base, now_utc


class ContactSubmission(Base):
    __tablename__ = 'contact_submissions'
    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    company = Column(Text, nullable=True)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_contact_submissions_is_read', 'is_read'),
        {'sqlite_autoincrement': True},
    )
