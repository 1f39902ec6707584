from datetime import datetime
from app.core.derived import is_past, is_upcoming
from app.modules.appointments.models import Appointment
from app.modules.appointments.schemas import AppointmentBrief, AppointmentOut, UpcomingAppointment
from app.modules.children.schemas import ChildSummary
from app.modules.hospitals.schemas import HospitalSummary
from app.modules.users.schemas import UserSummary

def build_appointment(appt: Appointment, user, child, hospital, now: datetime) -> AppointmentOut:
    return AppointmentOut(
        **AppointmentBrief.model_validate(appt).model_dump(),
        notes=appt.notes,
        created_at=appt.created_at,
        updated_at=appt.updated_at,
        is_upcoming=is_upcoming(appt.appointment_date, appt.status, now),
        is_past=is_past(appt.appointment_date, appt.status, now),
        user=UserSummary.model_validate(user),
        child=ChildSummary.of(child, now.date()) if child is not None else None,
        hospital=HospitalSummary.model_validate(hospital),
    )

def build_upcoming(appointments, hospitals: dict) -> list[UpcomingAppointment]:
    """Attach hospital summaries; `hospitals` is keyed by id."""
    return [
        UpcomingAppointment(
            **AppointmentBrief.model_validate(a).model_dump(),
            hospital=HospitalSummary.model_validate(hospitals[a.hospital_id]),
        )
        for a in appointments
    ]
