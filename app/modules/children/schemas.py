import uuid
from datetime import date, datetime
from pydantic import Field
from app.core.schemas import ApiModel
from app.core import derived

class ChildCreate(ApiModel):
    parent_id: uuid.UUID
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    gender: str = Field(..., min_length=1, max_length=16)
    blood_type: str | None = None
    allergies: str | None = None
    medical_conditions: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    profile_picture_url: str | None = None

class ChildUpdate(ApiModel):
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    date_of_birth: date | None = None
    gender: str | None = None
    blood_type: str | None = None
    allergies: str | None = None
    medical_conditions: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    profile_picture_url: str | None = None

class ChildSummary(ApiModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    full_name: str
    date_of_birth: date
    gender: str
    profile_picture_url: str | None = None
    age_in_years: int
    age_in_months: int

    @classmethod
    def of(cls, child, today: date, **extra):
        """Build from a Child row; ages are computed against `today`."""
        data = {name: getattr(child, name) for name in cls.model_fields if hasattr(child, name)}
        data.update(
            full_name=derived.full_name(child.first_name, child.last_name),
            age_in_years=derived.age_in_years(child.date_of_birth, today),
            age_in_months=derived.age_in_months(child.date_of_birth, today),
        )
        data.update(extra)
        return cls(**data)

class ChildContext(ChildSummary):
    allergies: str | None = None
    medical_conditions: str | None = None

class ChildOut(ChildContext):
    parent_id: uuid.UUID
    blood_type: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    created_at: datetime
    updated_at: datetime

class ChildListItem(ChildOut):
    medical_records_count: int = 0
    appointments_count: int = 0
