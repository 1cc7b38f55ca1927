import uuid
from datetime import datetime, timezone
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Boolean, DateTime, String

def utcnow():
    return datetime.now(timezone.utc)

def new_id() -> str:
    return str(uuid.uuid4())

class UUIDMixin:
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)

class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column("updatedAt", DateTime(timezone=True), default=utcnow)

class RecordMixin(UUIDMixin, TimestampMixin):
    """Columns every entity table shares; camelCase names are the on-disk contract."""

    updated_by: Mapped[str | None] = mapped_column("updatedBy", String(36), nullable=True)
    record_status: Mapped[bool] = mapped_column("recordStatus", Boolean, default=True, nullable=False)
    use_as: Mapped[str | None] = mapped_column("useAs", String(100), nullable=True)
    slug: Mapped[str | None] = mapped_column(String(200), nullable=True)
