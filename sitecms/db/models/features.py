from sqlalchemy import Column, Integer, Text, Boolean, DateTime, Index, false, true
from .base import Base, now_utc


class Feature(Base):
    __tablename__ = 'features'
    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    # Icon name or URL
    icon = Column(Text, nullable=True)
    is_highlighted = Column(Boolean, nullable=False, default=False, server_default=false())
    sort_order = Column(Integer, nullable=False, default=0, server_default='0')
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_features_sort_order_name', 'sort_order', 'name'),
        {'sqlite_autoincrement': True},
    )
