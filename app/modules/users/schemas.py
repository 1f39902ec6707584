import uuid
from datetime import date, datetime
from pydantic import EmailStr, Field
from app.core.schemas import ApiModel

class UserCreate(ApiModel):
    cognito_user_id: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None

class UserUpdate(ApiModel):
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    phone_number: str | None = None
    profile_picture_url: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None

class UserSummary(ApiModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    profile_picture_url: str | None = None

class UserOut(ApiModel):
    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    phone_number: str | None = None
    profile_picture_url: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str
    created_at: datetime
    updated_at: datetime

class UserListItem(ApiModel):
    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    profile_picture_url: str | None = None
    city: str | None = None
    state: str | None = None
    country: str
    created_at: datetime
    children_count: int = 0
