"""
models.py — SQLAlchemy ORM models.

The dashboard keeps only opaque blobs in browser storage (the offline crop
list and the language preference); they live here as key/value rows.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from krishimitra.database import Base


class KeyValueEntry(Base):
    __tablename__ = "key_value_store"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
