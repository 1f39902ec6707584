from datetime import date, datetime
from pydantic import Field
from app.core.derived import split_list
from app.core.schemas import ApiModel
from app.modules.appointments.schemas import UpcomingAppointment
from app.modules.appointments.views import build_upcoming
from app.modules.children import guidance
from app.modules.children.models import Child
from app.modules.children.schemas import ChildOut, ChildSummary
from app.modules.medical_records.schemas import CheckupHighlight, MedicalRecordBrief, VaccinationHighlight
from app.modules.users.schemas import UserSummary

# ---- Detail ----

class ChildDetail(ChildOut):
    parent: UserSummary
    recent_medical_records: list[MedicalRecordBrief] = Field(default_factory=list)
    upcoming_appointments: list[UpcomingAppointment] = Field(default_factory=list)

# ---- Dashboard ----

class HealthSummary(ApiModel):
    total_medical_records: int
    last_checkup: CheckupHighlight | None = None
    last_vaccination: VaccinationHighlight | None = None
    active_allergies: list[str] = Field(default_factory=list)
    medical_conditions: list[str] = Field(default_factory=list)

class ActivityItem(ApiModel):
    type: str
    title: str
    record_type: str
    date: datetime
    created_at: datetime

class GrowthMilestone(ApiModel):
    milestone: str
    expected_age: str
    status: str

class HealthTip(ApiModel):
    category: str
    tip: str
    priority: str

class ChildDashboard(ApiModel):
    child: ChildSummary
    health_summary: HealthSummary
    upcoming_appointments: list[UpcomingAppointment]
    recent_activity: list[ActivityItem]
    growth_milestones: list[GrowthMilestone]
    health_tips: list[HealthTip]


def build_child_detail(child: Child, parent, recent_records, upcoming, hospitals: dict, today: date) -> ChildDetail:
    return ChildDetail(
        **ChildOut.of(child, today).model_dump(),
        parent=UserSummary.model_validate(parent),
        recent_medical_records=[MedicalRecordBrief.model_validate(r) for r in recent_records],
        upcoming_appointments=build_upcoming(upcoming, hospitals),
    )


def recent_activity(records, appointments, hospitals: dict, limit: int = 10) -> list[ActivityItem]:
    """Merge record and appointment activity, newest first."""
    items = [
        ActivityItem(
            type="Medical Record",
            title=r.title,
            record_type=r.record_type,
            date=r.record_date,
            created_at=r.created_at,
        )
        for r in records
    ]
    items += [
        ActivityItem(
            type="Appointment",
            title=f"{a.appointment_type} - {hospitals[a.hospital_id].name}",
            record_type=a.appointment_type,
            date=a.appointment_date,
            created_at=a.created_at,
        )
        for a in appointments
    ]
    items.sort(key=lambda item: item.created_at, reverse=True)
    return items[:limit]


def build_dashboard(
    child: Child,
    today: date,
    *,
    total_records: int,
    last_checkup=None,
    last_vaccination=None,
    upcoming=(),
    recent_records=(),
    recent_appointments=(),
    hospitals: dict | None = None,
) -> ChildDashboard:
    hospitals = hospitals or {}
    summary = ChildSummary.of(child, today)
    return ChildDashboard(
        child=summary,
        health_summary=HealthSummary(
            total_medical_records=total_records,
            last_checkup=CheckupHighlight.model_validate(last_checkup) if last_checkup else None,
            last_vaccination=VaccinationHighlight.model_validate(last_vaccination) if last_vaccination else None,
            active_allergies=split_list(child.allergies),
            medical_conditions=split_list(child.medical_conditions),
        ),
        upcoming_appointments=build_upcoming(upcoming, hospitals),
        recent_activity=recent_activity(recent_records, recent_appointments, hospitals),
        growth_milestones=[GrowthMilestone(**m) for m in guidance.growth_milestones(summary.age_in_months)],
        health_tips=[HealthTip(**t) for t in guidance.health_tips(summary.age_in_months)],
    )
