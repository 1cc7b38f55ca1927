from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import RecordMixin

class Contact(Base, RecordMixin):
    __tablename__ = "contacts"
    name_one: Mapped[str] = mapped_column("nameOne", String(200), nullable=False)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subject: Mapped[str | None] = mapped_column(String(300), nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    people_id: Mapped[str | None] = mapped_column("peopleId", String(36), nullable=True)
