"""Exceptions raised by chat-input builders."""
from __future__ import annotations


class InvalidSystemMessageError(ValueError):
    """The system message is neither a system-role turn nor a string."""

    def __init__(self, value: object) -> None:
        super().__init__(
            "The system message defines the chatbot theme or instructions and "
            f"must be a system-role Turn or a str, got {type(value).__name__}"
        )
        self.value = value


class ConfigurationMissError(KeyError):
    """A required configuration property is absent."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Configuration property not found: {self.key!r}"
