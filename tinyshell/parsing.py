"""Tokenising of command lines and helpers shared by the stored lists."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

DELIMITERS = " \n\t|<>;&"

_SPLIT = re.compile("[" + re.escape(DELIMITERS) + "]+")
_COUNT = re.compile(r"\s*([+-]?\d+)\s*")


class ShellError(Exception):
    """A shell command could not be carried out; the message says why."""


def parse(line: str) -> list[str]:
    """Split a command line into tokens on blanks and the characters ``|<>;&``."""
    return [token for token in _SPLIT.split(line) if token]


def check_all_digits(token: str) -> bool:
    """Return True if every character of ``token`` is an ASCII digit."""
    return all("0" <= char <= "9" for char in token)


def is_history_command(tokens: Sequence[str]) -> bool:
    """Return True if the command starts with ``!``."""
    return bool(tokens) and tokens[0].startswith("!")


def _parse_counted_entries(text: str, limit: int, what: str) -> list[list[str]]:
    """Read a count line followed by up to that many command lines."""
    match = _COUNT.match(text)
    if match is None:
        raise ShellError(f"Error reading {what} count")
    count = max(0, min(int(match.group(1)), limit))
    lines = text[match.end():].split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [parse(line) for line in lines[:count]]


def _write_counted_entries(path, entries: Iterable[Sequence[str]]) -> None:
    """Write a count line followed by one space-joined line per entry."""
    entries = list(entries)
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(f"{len(entries)}\n")
        for entry in entries:
            handle.write(" ".join(entry) + "\n")