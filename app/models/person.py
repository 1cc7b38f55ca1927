from datetime import date
from sqlalchemy import Date, Float, String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import RecordMixin

class Person(Base, RecordMixin):
    __tablename__ = "people"
    name_one: Mapped[str] = mapped_column("nameOne", String(200), nullable=False)
    name_two: Mapped[str | None] = mapped_column("nameTwo", String(200), nullable=True)
    name_three: Mapped[str | None] = mapped_column("nameThree", String(200), nullable=True)
    birthdate: Mapped[date | None] = mapped_column(Date, nullable=True)
    birth_hour: Mapped[str | None] = mapped_column("birthHour", String(5), nullable=True)
    birth_country: Mapped[str | None] = mapped_column("birthCountry", String(100), nullable=True)
    identification_number: Mapped[str] = mapped_column("identificationNumber", String(50), nullable=False)
    identification_type: Mapped[str] = mapped_column("identificationType", String(50), nullable=False)
    gender_birth: Mapped[str | None] = mapped_column("genderBirth", String(10), nullable=True)
    gender_current: Mapped[str | None] = mapped_column("genderCurrent", String(10), nullable=True)
    marital_status: Mapped[str | None] = mapped_column("maritalStatus", String(20), nullable=True)
    language: Mapped[str | None] = mapped_column(String(50), nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    height: Mapped[float | None] = mapped_column(Float, nullable=True)
    blood_type: Mapped[str | None] = mapped_column("bloodType", String(3), nullable=True)
