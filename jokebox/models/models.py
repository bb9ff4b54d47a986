import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from jokebox.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Category(str, enum.Enum):
    RANDOM = "random"
    GENERAL = "general"
    PROGRAMMING = "programming"
    KNOCK_KNOCK = "knock-knock"
    DAD = "dad"


class Severity(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class ToggleOutcome(str, enum.Enum):
    ADDED = "added"
    REMOVED = "removed"


class ShareOutcome(str, enum.Enum):
    SHARED = "shared"
    CANCELLED = "cancelled"
    FAILED = "failed"


class ClientActionKind(str, enum.Enum):
    SHARE = "share"
    CLIPBOARD = "clipboard"


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )


class StorageItem(Base, TimestampMixin):
    """One string value of a browser's key/value store."""

    __tablename__ = "browser_storage"
    __table_args__ = (UniqueConstraint("client_id", "key", name="uq_browser_storage_client_key"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    client_id: Mapped[str] = mapped_column(String(64), index=True)
    key: Mapped[str] = mapped_column(String(100))
    value: Mapped[str] = mapped_column(Text)
