"""Turn-sequence conversation state shared by message-list providers."""
from __future__ import annotations

from collections.abc import Iterator

from chat_input.core.errors import InvalidSystemMessageError
from chat_input.core.models import Role, Turn


def coerce_system_turn(system_message: Turn | str) -> Turn:
    """Return ``system_message`` as a system-role turn.

    Raises:
        InvalidSystemMessageError: If it is neither a system-role
            :class:`Turn` nor a ``str``.
    """
    if isinstance(system_message, Turn) and system_message.is_system_role():
        return system_message
    if isinstance(system_message, str):
        return Turn.system(system_message)
    raise InvalidSystemMessageError(system_message)


class TurnHistory:
    """Ordered turns that always start with the system turn.

    The sequence is never empty: :meth:`reset` collapses it back to the
    system turn it was created with.
    """

    def __init__(self, system_message: Turn | str) -> None:
        self._turns: list[Turn] = [coerce_system_turn(system_message)]

    @property
    def system_turn(self) -> Turn:
        return self._turns[0]

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self._turns)

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)

    def append_text(self, text: str, role: Role) -> None:
        self._turns.append(Turn(text, role))

    def reset(self) -> None:
        del self._turns[1:]

    def remove_last(self, turn: Turn) -> bool:
        """Remove the matching turn nearest the end of the sequence.

        Matching is by role and content.  Scanning backwards means a repeated
        utterance is undone from its most recent occurrence.  The leading
        system turn is never removed.

        Returns:
            True if a turn was removed, False if none matched.
        """
        for i in range(len(self._turns) - 1, 0, -1):
            if self._turns[i].matches(turn):
                del self._turns[i]
                return True
        return False
