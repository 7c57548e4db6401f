"""
SQLAlchemy ORM models for progress persistence.
"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class DailyCount(Base):
    """
    Cards completed in MEMORIZE sessions for one list on one reference-zone day.

    A missing row means zero; rows are only ever incremented.
    """
    __tablename__ = 'daily_counts'

    # Primary key: composite of list_id and day
    list_id = Column(String(255), primary_key=True, nullable=False)
    day = Column(String(10), primary_key=True, nullable=False)  # YYYY-MM-DD

    count = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<DailyCount({self.list_id}, {self.day}, count={self.count})>"
