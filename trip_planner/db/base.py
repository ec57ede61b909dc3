"""
Declarative base and common columns shared by all models.
"""
from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

from trip_planner.core.utils import utcnow

Base = declarative_base()


class BaseModel(Base):
    """Abstract model with surrogate key and bookkeeping timestamps."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
