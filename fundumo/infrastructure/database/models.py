from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from .connection import Base


class KeyValueItem(Base):
    """One persisted value per namespaced key (e.g. '@fundumo:feedback')."""

    __tablename__ = "kv_store"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
