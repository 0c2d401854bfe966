"""Builder for Llama chat models deployed on SageMaker endpoints."""
from __future__ import annotations

from typing import Any

from chat_input.builders.history import TurnHistory
from chat_input.core.models import Role, Turn


class SageMakerLlamaBuilder:
    """Conversation rendered for a hosted SageMaker inference endpoint.

    The endpoint takes a batch of dialogs; this builder always sends a batch
    of one.  ``parameters`` is forwarded untouched.

    Implements :class:`ConversationBuilder`.
    """

    def __init__(
        self,
        system_message: Turn | str,
        parameters: dict[str, Any] | None = None,
    ) -> None:
        self._history = TurnHistory(system_message)
        self.parameters: dict[str, Any] = parameters if parameters is not None else {}

    @property
    def messages(self) -> tuple[Turn, ...]:
        return self._history.turns

    def append_message(self, turn: Turn) -> None:
        self._history.append(turn)

    def append_user(self, text: str) -> None:
        self._history.append_text(text, Role.USER)

    def append_assistant(self, text: str) -> None:
        self._history.append_text(text, Role.ASSISTANT)

    def append_system(self, text: str) -> None:
        self._history.append_text(text, Role.SYSTEM)

    def reset(self) -> None:
        self._history.reset()

    def remove_last(self, turn: Turn) -> bool:
        return self._history.remove_last(turn)

    def render(self) -> dict[str, Any]:
        dialog = [{"role": t.role.value, "content": t.content} for t in self._history]
        return {"parameters": self.parameters, "inputs": [dialog]}
