"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserProfileModel(Base):
    """Per-user profile document.

    Email is indexed for the uniqueness query. It carries no unique
    constraint; uniqueness is checked before each write.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    patient_id: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(200))
    email: Mapped[str | None] = mapped_column(String(255), index=True)
    phone_number: Mapped[str | None] = mapped_column(String(32))
    address: Mapped[str | None] = mapped_column(String(500))
    weight: Mapped[str | None] = mapped_column(String(16))
    height: Mapped[str | None] = mapped_column(String(16))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class SensorModel(Base):
    """Paired device sensor."""

    __tablename__ = "sensors"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


# Document key -> column attribute
DOCUMENT_COLUMNS: dict[str, str] = {
    "patientID": "patient_id",
    "name": "name",
    "email": "email",
    "phoneNumber": "phone_number",
    "address": "address",
    "weight": "weight",
    "height": "height",
}
