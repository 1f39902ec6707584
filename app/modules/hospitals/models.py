from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Numeric
from app.core.base import Base, TimestampedMixin
from app.core.codecs import JsonList

COMMON_SPECIALTIES = [
    "Pediatrics", "General Medicine", "Emergency Medicine", "Cardiology",
    "Neurology", "Orthopedics", "Dermatology", "ENT (Ear, Nose, Throat)",
    "Ophthalmology", "Dentistry", "Psychiatry", "Radiology", "Pathology",
    "Anesthesiology", "Surgery", "Obstetrics & Gynecology", "Urology",
    "Gastroenterology", "Pulmonology", "Endocrinology",
]

class Hospital(Base, TimestampedMixin):
    name: Mapped[str] = mapped_column(String(200), index=True)
    address: Mapped[str] = mapped_column(String(500))
    city: Mapped[str] = mapped_column(String(100), index=True)
    state: Mapped[str] = mapped_column(String(100))
    zip_code: Mapped[str] = mapped_column(String(20))
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    latitude: Mapped[float | None] = mapped_column(Numeric(10, 8, asdecimal=False), nullable=True)
    longitude: Mapped[float | None] = mapped_column(Numeric(11, 8, asdecimal=False), nullable=True)
    specialties: Mapped[list] = mapped_column(JsonList, default=list)
    rating: Mapped[float] = mapped_column(Numeric(3, 2, asdecimal=False), default=0)
    total_reviews: Mapped[int] = mapped_column(Integer, default=0)

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state} {self.zip_code}".strip()
