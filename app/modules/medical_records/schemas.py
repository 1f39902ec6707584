import uuid
from datetime import datetime
from pydantic import Field
from app.core.schemas import ApiModel, UtcDatetime
from app.modules.children.schemas import ChildSummary

class MedicalRecordCreate(ApiModel):
    child_id: uuid.UUID
    record_type: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    doctor_name: str | None = None
    hospital_name: str | None = None
    record_date: UtcDatetime
    medications: str | None = None
    notes: str | None = None
    attachment_urls: list[str] = Field(default_factory=list)

class MedicalRecordUpdate(ApiModel):
    record_type: str | None = Field(None, min_length=1, max_length=50)
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    doctor_name: str | None = None
    hospital_name: str | None = None
    record_date: UtcDatetime | None = None
    medications: str | None = None
    notes: str | None = None
    # replaces the whole list when supplied
    attachment_urls: list[str] | None = None

class MedicalRecordBrief(ApiModel):
    id: uuid.UUID
    record_type: str
    title: str
    record_date: datetime
    doctor_name: str | None = None
    hospital_name: str | None = None

class MedicalRecordOut(MedicalRecordBrief):
    child_id: uuid.UUID
    description: str | None = None
    medications: str | None = None
    notes: str | None = None
    attachment_urls: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

class MedicalRecordDetail(MedicalRecordOut):
    child: ChildSummary

class RecordHighlight(ApiModel):
    record_date: datetime

class CheckupHighlight(RecordHighlight):
    doctor_name: str | None = None

class VaccinationHighlight(RecordHighlight):
    title: str

class RecordTypeCount(ApiModel):
    record_type: str
    count: int

class MedicalSummary(ApiModel):
    child: ChildSummary
    total_records: int
    records_by_type: list[RecordTypeCount]
    recent_records: list[MedicalRecordBrief]
    last_vaccination: MedicalRecordBrief | None = None
    last_checkup: MedicalRecordBrief | None = None
