from datetime import date, datetime, timezone
from typing import Protocol, runtime_checkable

def to_naive_utc(value: datetime) -> datetime:
    """Stored datetimes are naive UTC; aware inputs are converted, naive ones taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)

@runtime_checkable
class Clock(Protocol):
    def now(self) -> datetime: ...
    def today(self) -> date: ...

class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc).replace(tzinfo=None)

    def today(self) -> date:
        return self.now().date()

class FixedClock:
    def __init__(self, at: datetime):
        self.at = to_naive_utc(at)

    def now(self) -> datetime:
        return self.at

    def today(self) -> date:
        return self.at.date()

_system_clock = SystemClock()

def get_clock() -> Clock:
    return _system_clock
