"""SQLAlchemy ORM models for HabitQuest."""

from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class KeyValueRecord(Base):
    """One durable key-value pair.  Values are opaque strings (JSON)."""

    __tablename__ = "kv_records"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now,
    )

    def __repr__(self) -> str:
        return f"<KeyValueRecord key={self.key} size={len(self.value or '')}>"
