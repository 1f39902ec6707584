import re
import uuid
from datetime import datetime
from sqlalchemy.orm import DeclarativeBase, declared_attr, Mapped, mapped_column
from sqlalchemy import text, true, DateTime, Boolean

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")

class Base(DeclarativeBase):
    pass

class CreatedMixin:
    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=text("CURRENT_TIMESTAMP"))

    @declared_attr.directive
    def __tablename__(cls) -> str:
        # ChatConversation -> chat_conversation
        return _CAMEL.sub("_", cls.__name__).lower()

class UpdatedMixin(CreatedMixin):
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=text("CURRENT_TIMESTAMP"))

class TimestampedMixin(UpdatedMixin):
    # soft delete flag; inactive rows stay in the table
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true())
