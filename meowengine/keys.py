"""Keyboard model: the keys the engine reacts to and a scripted input source."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Key(enum.Enum):
    """Keys polled by the engine."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESC = "esc"
    SECOND = "2nd"


class ScriptedKeys:
    """Key source that replays a fixed sequence; None stands for no key held."""

    def __init__(self, keys: Iterable[Key | None]) -> None:
        self._pending: deque[Key | None] = deque()
        for key in keys:
            if key is not None and not isinstance(key, Key):
                raise TypeError(f"not a key: {key!r}")
            self._pending.append(key)

    def poll(self) -> Key | None:
        """Return the key held at this poll; raise EOFError once the script is used up."""
        if not self._pending:
            raise EOFError("scripted key input exhausted")
        return self._pending.popleft()

    def exhausted(self) -> bool:
        return not self._pending