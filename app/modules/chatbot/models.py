import uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, ForeignKey
from app.core.base import Base, TimestampedMixin
from app.core.codecs import JsonList

class ChatConversation(Base, TimestampedMixin):
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)
    child_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("child.id", ondelete="SET NULL"), nullable=True)
    session_id: Mapped[str] = mapped_column(String(64), index=True)
    # [{role, content, timestamp, evidence?, sources?}, ...] in append order
    messages: Mapped[list] = mapped_column(JsonList(object), default=list)
