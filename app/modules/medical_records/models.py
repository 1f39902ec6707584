import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, DateTime, ForeignKey
from app.core.base import Base, TimestampedMixin
from app.core.codecs import JsonList

# open set; other values are accepted as-is
RECORD_TYPES = [
    "Vaccination", "Checkup", "Illness", "Surgery", "Allergy",
    "Prescription", "LabResult", "Imaging", "Emergency", "Other",
]

class MedicalRecord(Base, TimestampedMixin):
    child_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("child.id", ondelete="CASCADE"), index=True)
    record_type: Mapped[str] = mapped_column(String(50))
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    doctor_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    hospital_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    record_date: Mapped[datetime] = mapped_column(DateTime, index=True)
    medications: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachment_urls: Mapped[list] = mapped_column(JsonList, default=list)
