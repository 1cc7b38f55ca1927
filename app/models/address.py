from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import RecordMixin

class Address(Base, RecordMixin):
    __tablename__ = "address"
    street: Mapped[str] = mapped_column(String(300), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    postal_code: Mapped[str | None] = mapped_column("postalCode", String(20), nullable=True)
    people_id: Mapped[str | None] = mapped_column("peopleId", String(36), nullable=True)
