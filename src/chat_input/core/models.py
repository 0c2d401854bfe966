"""Core data models for chat-input."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Role(str, Enum):
    """Speaker of a single conversation turn."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ProviderKind(str, Enum):
    """Backend family a builder renders for."""

    OPENAI = "openai"
    LLAMA = "llama"
    REPLICATE = "replicate"
    SAGEMAKER = "sagemaker"


# ---------------------------------------------------------------------------
# Turns
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Turn:
    """A single message in a conversation.

    Attributes:
        content: The text content of the turn.
        role: Who produced the turn.  Plain strings (``"user"``) are coerced
            to :class:`Role`.
        name: Optional participant name, forwarded only by providers that
            accept it.
    """

    content: str
    role: Role = Role.USER
    name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.role, Role):
            # frozen: bypass __setattr__ for the one-off coercion
            object.__setattr__(self, "role", Role(self.role))

    @classmethod
    def system(cls, content: str, name: str | None = None) -> Turn:
        return cls(content, Role.SYSTEM, name)

    @classmethod
    def user(cls, content: str, name: str | None = None) -> Turn:
        return cls(content, Role.USER, name)

    @classmethod
    def assistant(cls, content: str, name: str | None = None) -> Turn:
        return cls(content, Role.ASSISTANT, name)

    def is_system_role(self) -> bool:
        """Return True if this turn carries a system instruction."""
        return self.role is Role.SYSTEM

    def matches(self, other: Turn) -> bool:
        """Compare by role and content, ignoring ``name``."""
        return self.role is other.role and self.content == other.content
