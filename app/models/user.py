from datetime import datetime
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import RecordMixin

class User(Base, RecordMixin):
    __tablename__ = "users"
    user_name: Mapped[str] = mapped_column("userName", String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    password_hash: Mapped[str] = mapped_column("passwordHash", String(255), nullable=False)
    password_reset_token: Mapped[str | None] = mapped_column("passwordResetToken", String(255), nullable=True)
    token_verification: Mapped[str | None] = mapped_column("tokenVerification", String(255), nullable=True)
    people_id: Mapped[str | None] = mapped_column("peopleId", String(36), nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    role: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(String(30), nullable=False)
    last_login: Mapped[datetime | None] = mapped_column("lastLogin", DateTime(timezone=True), nullable=True)
