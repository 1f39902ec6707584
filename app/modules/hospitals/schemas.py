import uuid
from datetime import datetime
from pydantic import Field
from app.core.schemas import ApiModel

class HospitalSummary(ApiModel):
    id: uuid.UUID
    name: str
    address: str
    full_address: str
    phone_number: str | None = None

class HospitalOut(ApiModel):
    id: uuid.UUID
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone_number: str | None = None
    email: str | None = None
    website: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    specialties: list[str] = Field(default_factory=list)
    rating: float
    total_reviews: int
    full_address: str

class HospitalListItem(HospitalOut):
    distance_km: float | None = None

class HospitalAppointmentSlot(ApiModel):
    appointment_date: datetime
    appointment_type: str
    status: str

class HospitalDetail(HospitalOut):
    created_at: datetime
    updated_at: datetime
    upcoming_appointments: list[HospitalAppointmentSlot] = Field(default_factory=list)
