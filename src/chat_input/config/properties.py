"""Dotted-key property lookup over a nested configuration tree."""
from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

_log = logging.getLogger(__name__)


@runtime_checkable
class PropertyLookup(Protocol):
    """Read-only key/value source for default models, versions and URLs."""

    def get_property(self, key: str) -> str | None:
        """Return the value stored under a dot-notation key.

        Args:
            key: Key such as ``"models.replicate.llama.13b"``.

        Returns:
            The value as a string, or ``None`` if the key is absent.
        """
        ...


class PropertyStore:
    """In-memory :class:`PropertyLookup` backed by a nested dict.

    Keys are split on ``.`` only, so a segment may contain dashes
    (``"13b-chat-version"``).  Scalar leaves are returned as strings; keys that
    resolve to a mapping, to ``None`` or to nothing at all return ``None``.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    def get_property(self, key: str) -> str | None:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                _log.debug("Property %r not found", key)
                return None
            node = node[part]
        if node is None or isinstance(node, dict):
            return None
        return str(node)

    def as_dict(self) -> dict[str, Any]:
        return self._data

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get_property(key) is not None
