import uuid
from datetime import datetime
from pydantic import Field
from app.core.schemas import ApiModel, UtcDatetime
from app.modules.users.schemas import UserSummary
from app.modules.children.schemas import ChildSummary
from app.modules.hospitals.schemas import HospitalSummary

class AppointmentBook(ApiModel):
    user_id: uuid.UUID
    child_id: uuid.UUID | None = None
    doctor_name: str | None = None
    appointment_date: UtcDatetime
    appointment_type: str = Field(..., min_length=1, max_length=50)
    notes: str | None = None

class AppointmentStatusUpdate(ApiModel):
    status: str
    notes: str | None = None

class AppointmentStatusOut(ApiModel):
    id: uuid.UUID
    status: str
    notes: str | None = None
    updated_at: datetime

class AppointmentBrief(ApiModel):
    id: uuid.UUID
    appointment_date: datetime
    appointment_type: str
    doctor_name: str | None = None
    status: str

class UpcomingAppointment(AppointmentBrief):
    hospital: HospitalSummary

class AppointmentOut(AppointmentBrief):
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    is_upcoming: bool
    is_past: bool
    user: UserSummary
    child: ChildSummary | None = None
    hospital: HospitalSummary
