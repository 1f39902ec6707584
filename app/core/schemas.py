from datetime import datetime
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from app.core.clock import to_naive_utc

class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

# incoming timestamps are stored as naive UTC
UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]
