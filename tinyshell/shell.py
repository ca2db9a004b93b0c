"""The command interpreter: built-ins, history recall, aliases and programs."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .aliases import AliasTable
from .history import History
from .parsing import ShellError, check_all_digits, is_history_command

MAX_ALIAS_DEPTH = 3


class Shell:
    """Runs tokenised commands against a history and an alias table."""

    def __init__(
        self,
        history: History | None = None,
        aliases: AliasTable | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.history = history if history is not None else History()
        self.aliases = aliases if aliases is not None else AliasTable()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self._builtins = {
            "cd": self.change_directory,
            "getpath": self.get_path,
            "setpath": self.set_path,
            "alias": self._alias_command,
            "unalias": self.remove_alias,
        }

    def _report(self, message: str) -> None:
        self.err.write(message + "\n")

    def run(self, tokens: Sequence[str], new_command: bool = True, depth: int = 0) -> None:
        """Run one command and record it in the history when ``new_command`` is set.

        History recalls and commands that fail to expand as aliases are not recorded.
        """
        tokens = list(tokens)
        if not tokens:
            return
        record = new_command
        try:
            if is_history_command(tokens):
                record = False
                self.run_history_command(tokens)
            elif tokens[0] in self.aliases:
                record = False
                if self.run_alias(tokens, depth):
                    record = new_command
            elif tokens[0] == "history":
                # Recorded first so that the listing shows this very command.
                self.history.add(tokens)
                record = False
                self.print_history(tokens)
            elif tokens[0] in self._builtins:
                self._builtins[tokens[0]](tokens)
            else:
                self.execute(tokens)
        except ShellError as exc:
            self._report(str(exc))
        if record:
            self.history.add(tokens)

    def execute(self, tokens: Sequence[str]) -> int:
        """Run an external program and wait for it; return its exit status."""
        self.out.flush()
        self.err.flush()
        try:
            completed = subprocess.run(list(tokens), check=False)
        except OSError as exc:
            self._report(f"{tokens[0]}: {exc.strerror or exc}")
            return 1
        return completed.returncode if completed.returncode >= 0 else 0

    def get_path(self, tokens: Sequence[str]) -> None:
        """Print the current program search path."""
        if len(tokens) > 1:
            raise ShellError("Error: Too many parameters")
        self.out.write(f"PATH: {os.environ.get('PATH', '')} \n")

    def set_path(self, tokens: Sequence[str]) -> None:
        """Set the program search path to the single argument."""
        if len(tokens) < 2:
            raise ShellError("Error: Too few parameters - must include a path to set")
        if len(tokens) > 2:
            raise ShellError("Error: Too many parameters")
        os.environ["PATH"] = tokens[1]

    def change_directory(self, tokens: Sequence[str]) -> None:
        """Change the working directory, to the home directory if none is given."""
        if len(tokens) < 2:
            try:
                os.chdir(os.environ.get("HOME") or Path.home())
            except OSError:
                pass
            return
        if len(tokens) > 2:
            raise ShellError("Error: Too many parameters")
        target = tokens[1]
        try:
            os.chdir(target)
        except FileNotFoundError:
            raise ShellError(
                f"'{target}', No such file or directory\nEnter a valid file or directory"
            ) from None
        except NotADirectoryError:
            raise ShellError(
                f"'{target}' is not a directory\nEnter a valid directory"
            ) from None
        except OSError:
            pass

    def run_history_command(self, tokens: Sequence[str]) -> None:
        """Run a command recalled with ``!!``, ``!<n>`` or ``!-<n>``."""
        spec = tokens[0][1:]
        count = len(self.history)
        invalid = (
            f"You have {count} history commands in history. "
            "Please enter a valid history number."
        )
        if spec.startswith("!") and count > 0:
            if spec != "!":
                self.out.write(
                    "Unexpected input following !!. "
                    "Please enter either !!, !<no> or !-<no>.\n"
                )
                return
            self.run(self.history.recent(1), False, 0)
        elif spec.startswith("-"):
            digits = spec[1:]
            if not check_all_digits(digits):
                raise ShellError(invalid)
            number = int(digits) if digits else 0
            if 1 <= number <= count:
                self.run(self.history.recent(number), False, 0)
                return
            if number == 0:
                raise ShellError(
                    "'-0' is not a valid positive or negative history integer.\n" + invalid
                )
            raise ShellError(invalid)
        else:
            if not check_all_digits(spec):
                raise ShellError(invalid)
            number = int(spec) if spec else 0
            if 1 <= number <= count:
                self.run(self.history.get(number), False, 0)
                return
            if spec.startswith("0"):
                raise ShellError(
                    "'0' is not a valid positive or negative history integer.\n" + invalid
                )
            raise ShellError(invalid)

    def run_alias(self, tokens: Sequence[str], depth: int = 0) -> bool:
        """Expand an alias and run the result; return False if it is no alias."""
        if depth >= MAX_ALIAS_DEPTH:
            raise ShellError("Error: Alias loop limit reached")
        if tokens[0] not in self.aliases:
            return False
        expanded = self.aliases.lookup(tokens[0]) + list(tokens[1:])
        self.run(expanded, True, depth + 1)
        return True

    def _alias_command(self, tokens: Sequence[str]) -> None:
        if len(tokens) < 2:
            self.print_aliases()
        else:
            self.add_alias(tokens)

    def add_alias(self, tokens: Sequence[str]) -> None:
        """Define ``alias name command [args...]``, replacing any alias of that name."""
        if len(tokens) < 3:
            raise ShellError(
                "Error: correct formatting is for usage: alias name command [args...]"
            )
        name = tokens[1]
        if self.aliases.add(name, tokens[2:]):
            self.out.write(f"Previous alias '{name}' has been overwritten.\n")
        else:
            self.out.write(f"Alias '{name}' successfully assigned\n")

    def remove_alias(self, tokens: Sequence[str]) -> None:
        """Remove the alias named by the single argument."""
        if len(tokens) < 2:
            raise ShellError("Error: Too few parameters - must include alias to remove")
        if len(tokens) > 2:
            raise ShellError("Error: Too many parameters")
        self.aliases.remove(tokens[1])
        self.out.write(f"Alias '{tokens[1]}' successfully removed.\n")

    def print_history(self, tokens: Sequence[str]) -> None:
        """Print the numbered history."""
        if not len(self.history):
            raise ShellError("History list is empty.")
        if len(tokens) > 1:
            raise ShellError("Error: Too many parameters")
        self.out.write(self.history.format())

    def print_aliases(self) -> None:
        """Print the numbered aliases."""
        if not len(self.aliases):
            raise ShellError("Alias list is empty")
        self.out.write(self.aliases.format())