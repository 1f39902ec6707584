from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable
from app.modules.children.schemas import ChildContext

@dataclass
class AssistantReply:
    content: str
    evidence: str | None = None
    sources: list[str] = field(default_factory=list)

@runtime_checkable
class TextResponderPort(Protocol):
    async def respond(self, message: str, child: ChildContext | None = None) -> AssistantReply: ...
