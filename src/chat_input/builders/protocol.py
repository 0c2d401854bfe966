"""Conversation builder protocol."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConversationBuilder(Protocol):
    """Protocol that all provider builders must satisfy.

    A builder owns one conversation and renders it, on demand, into the exact
    request payload its provider expects.  Turn-sequence builders additionally
    offer ``append_system``, ``append_message`` and ``remove_last``.
    """

    def append_user(self, text: str) -> None:
        """Record a user turn."""
        ...

    def append_assistant(self, text: str) -> None:
        """Record an assistant turn."""
        ...

    def reset(self) -> None:
        """Drop the conversation history, keeping the system instruction."""
        ...

    def render(self) -> dict[str, Any]:
        """Build a fresh request payload from the current state.

        Returns:
            A JSON-serialisable dict whose field names and nesting match the
            provider's wire format.
        """
        ...
