import math
from datetime import date, datetime

EARTH_RADIUS_KM = 6371.0

CLOSED_STATUSES = ("Cancelled", "Completed")


def age_in_years(birthdate: date, today: date) -> int:
    years = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        years -= 1
    return years


def age_in_months(birthdate: date, today: date) -> int:
    months = (today.year - birthdate.year) * 12 + today.month - birthdate.month
    if today.day < birthdate.day:
        months -= 1
    return months


def full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) * math.sin(d_lat / 2)
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) * math.sin(d_lon / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def is_upcoming(appointment_date: datetime, status: str, now: datetime) -> bool:
    return appointment_date > now and status not in CLOSED_STATUSES


def is_past(appointment_date: datetime, status: str, now: datetime) -> bool:
    return appointment_date <= now or status == "Completed"


def split_list(text: str | None) -> list[str]:
    """Comma separated free text (allergies, conditions) as a list."""
    if not text:
        return []
    return [part.strip() for part in text.split(",")]
