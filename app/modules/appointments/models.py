import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, DateTime, ForeignKey
from app.core.base import Base, UpdatedMixin

APPOINTMENT_STATUSES = ["Scheduled", "Confirmed", "InProgress", "Completed", "Cancelled", "NoShow"]

APPOINTMENT_TYPES = [
    "GeneralCheckup", "Vaccination", "FollowUp", "Emergency", "Consultation",
    "Specialist", "LabTest", "Imaging", "Surgery", "Therapy", "Other",
]

class Appointment(Base, UpdatedMixin):
    # appointments are never soft-deleted; Cancelled is their terminal state
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)
    child_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("child.id", ondelete="SET NULL"), nullable=True, index=True)
    hospital_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("hospital.id", ondelete="RESTRICT"), index=True)
    doctor_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    appointment_date: Mapped[datetime] = mapped_column(DateTime, index=True)
    appointment_type: Mapped[str] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="Scheduled")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
