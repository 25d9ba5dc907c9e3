"""
User Model

Stores registered accounts and anonymous guest observers.
Guests have neither an email nor a password.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from launchwatch.db.base_class import Base
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=True)
    password_hash = Column(String, nullable=True)

    is_anonymous = Column(Boolean, default=False)
    created_at = Column(DateTime, default=_utcnow)

    comments = relationship("Comment", back_populates="author")
