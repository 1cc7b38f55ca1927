from datetime import datetime
from sqlalchemy import Boolean, DateTime, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import RecordMixin

class Blog(Base, RecordMixin):
    __tablename__ = "blogs"
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    sumary: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    feature_image: Mapped[str | None] = mapped_column("featureImage", String(500), nullable=True)
    is_published: Mapped[bool] = mapped_column("isPublished", Boolean, default=False, nullable=False)
    published_at: Mapped[datetime | None] = mapped_column("date", DateTime(timezone=True), nullable=True)
    tag_list: Mapped[list | None] = mapped_column("tagList", JSON, nullable=True)
    user_id: Mapped[str | None] = mapped_column("userId", String(36), nullable=True)
