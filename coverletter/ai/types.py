from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class AIConfigurationError(RuntimeError):
    pass


class AIClient(Protocol):
    async def complete(self, messages: Sequence[ChatMessage]) -> str: ...
