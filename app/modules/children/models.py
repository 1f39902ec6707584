import uuid
from datetime import date
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Date, ForeignKey
from app.core.base import Base, TimestampedMixin

class Child(Base, TimestampedMixin):
    parent_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    date_of_birth: Mapped[date] = mapped_column(Date)
    gender: Mapped[str] = mapped_column(String(16))
    blood_type: Mapped[str | None] = mapped_column(String(8), nullable=True)
    # free text, comma separated
    allergies: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    medical_conditions: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    emergency_contact: Mapped[str | None] = mapped_column(String(200), nullable=True)
    emergency_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    profile_picture_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
