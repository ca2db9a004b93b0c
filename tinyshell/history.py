"""Bounded command history that drops its oldest entry when full."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from pathlib import Path

from .parsing import _parse_counted_entries, _write_counted_entries

MAX_HISTORY_SIZE = 20


class History:
    """The most recent commands, numbered from 1 (oldest) upwards."""

    def __init__(self, capacity: int = MAX_HISTORY_SIZE) -> None:
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self.capacity = capacity
        self._entries: deque[tuple[str, ...]] = deque(maxlen=capacity)

    def add(self, tokens: Sequence[str]) -> None:
        """Record a command, evicting the oldest one if the history is full."""
        self._entries.append(tuple(tokens))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[list[str]]:
        return (list(entry) for entry in self._entries)

    def get(self, number: int) -> list[str]:
        """Return command ``number``, counting from 1 for the oldest."""
        if not 1 <= number <= len(self._entries):
            raise IndexError(f"no history entry {number}")
        return list(self._entries[number - 1])

    def recent(self, offset: int) -> list[str]:
        """Return the command ``offset`` places back, 1 being the latest."""
        if not 1 <= offset <= len(self._entries):
            raise IndexError(f"no history entry -{offset}")
        return list(self._entries[-offset])

    def format(self) -> str:
        """Render the history as numbered lines."""
        return "".join(
            f"{number}: {''.join(token + ' ' for token in entry)}\n"
            for number, entry in enumerate(self._entries, start=1)
        )

    def save(self, path) -> None:
        """Write the history to ``path``."""
        _write_counted_entries(path, self._entries)

    def load(self, path) -> int:
        """Replace the history with the contents of ``path``; return the count loaded."""
        text = Path(path).read_text(encoding="utf-8")
        self._entries.clear()
        for tokens in _parse_counted_entries(text, self.capacity, "history"):
            self._entries.append(tuple(tokens))
        return len(self._entries)