"""Builder for OpenAI-style chat-completion requests."""
from __future__ import annotations

from typing import Any

from openai.types.chat import (
    ChatCompletionAssistantMessageParam,
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)

from chat_input.builders.history import TurnHistory
from chat_input.core.models import Role, Turn

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 1


def _message_param(turn: Turn) -> ChatCompletionMessageParam:
    """Serialise a turn as {role, content}, or {role, name, content} when named."""
    if turn.role is Role.SYSTEM:
        if turn.name:
            return ChatCompletionSystemMessageParam(role="system", name=turn.name, content=turn.content)
        return ChatCompletionSystemMessageParam(role="system", content=turn.content)
    if turn.role is Role.USER:
        if turn.name:
            return ChatCompletionUserMessageParam(role="user", name=turn.name, content=turn.content)
        return ChatCompletionUserMessageParam(role="user", content=turn.content)
    if turn.name:
        return ChatCompletionAssistantMessageParam(role="assistant", name=turn.name, content=turn.content)
    return ChatCompletionAssistantMessageParam(role="assistant", content=turn.content)


class ChatCompletionBuilder:
    """Conversation rendered as a ``/v1/chat/completions`` request body.

    Implements :class:`ConversationBuilder`.

    Args:
        system_message: System-role :class:`Turn` or plain instruction text.
        model: Model identifier (e.g. ``"gpt-4o"``).
        temperature: Sampling temperature.
        max_tokens: Maximum tokens in the response.  Omitted when unset.

    Raises:
        InvalidSystemMessageError: If ``system_message`` is not a system turn
            or a string.
    """

    def __init__(
        self,
        system_message: Turn | str,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> None:
        self._history = TurnHistory(system_message)
        self.model = model or DEFAULT_MODEL
        self.temperature = DEFAULT_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens
        self.number_of_outputs = 1

    @property
    def messages(self) -> tuple[Turn, ...]:
        return self._history.turns

    # -- ConversationBuilder interface ----------------------------------------

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
        """Return the chat-completion request body.

        ``temperature``, ``n`` and ``max_tokens`` are only included when
        truthy, so an explicit ``0`` is left out of the payload.
        """
        messages = [_message_param(turn) for turn in self._history]

        params: dict[str, Any] = {"model": self.model, "messages": messages}
        if self.temperature:
            params["temperature"] = self.temperature
        if self.number_of_outputs:
            params["n"] = self.number_of_outputs
        if self.max_tokens:
            params["max_tokens"] = self.max_tokens
        return params
