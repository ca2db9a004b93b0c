"""A bounded table of command aliases."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

from .parsing import ShellError, _parse_counted_entries, _write_counted_entries

MAX_ALIAS = 10


class AliasTable:
    """Aliases from a name to the command it stands for."""

    def __init__(self, capacity: int = MAX_ALIAS) -> None:
        if capacity < 1:
            raise ValueError("alias capacity must be at least 1")
        self.capacity = capacity
        self._entries: list[tuple[str, tuple[str, ...]]] = []

    def _index(self, name: str) -> int | None:
        return next(
            (i for i, (alias, _) in enumerate(self._entries) if alias == name),
            None,
        )

    def add(self, name: str, command: Sequence[str]) -> bool:
        """Set an alias; return True if an existing alias was overwritten."""
        if not command:
            raise ShellError(
                "Error: correct formatting is for usage: alias name command [args...]"
            )
        entry = (name, tuple(command))
        index = self._index(name)
        if index is not None:
            self._entries[index] = entry
            return True
        if len(self._entries) >= self.capacity:
            raise ShellError("No more aliases can be set.")
        self._entries.append(entry)
        return False

    def remove(self, name: str) -> None:
        """Remove an alias; the last alias takes the freed place."""
        if not self._entries:
            raise ShellError(
                "Error: Alias list is empty, there are no aliases to remove"
            )
        index = self._index(name)
        if index is None:
            raise ShellError("Error: Alias does not exist")
        last = self._entries.pop()
        if index < len(self._entries):
            self._entries[index] = last

    def lookup(self, name: str) -> list[str]:
        """Return the command an alias stands for."""
        index = self._index(name)
        if index is None:
            raise KeyError(name)
        return list(self._entries[index][1])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index(name) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        return ((name, list(command)) for name, command in self._entries)

    def format(self) -> str:
        """Render the aliases as numbered lines of name and command."""
        return "".join(
            f"{number}: {''.join(token + ' ' for token in (name, *command))}\n"
            for number, (name, command) in enumerate(self._entries, start=1)
        )

    def save(self, path) -> None:
        """Write the aliases to ``path``."""
        _write_counted_entries(path, ((name, *command) for name, command in self._entries))

    def load(self, path) -> int:
        """Replace the aliases with the contents of ``path``; return the count loaded."""
        text = Path(path).read_text(encoding="utf-8")
        self._entries.clear()
        for tokens in _parse_counted_entries(text, self.capacity, "alias"):
            if tokens:
                self._entries.append((tokens[0], tuple(tokens[1:])))
        return len(self._entries)