"""The interactive loop and the command that starts the shell."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from .aliases import AliasTable
from .history import History
from .parsing import ShellError, parse
from .shell import Shell

MAX_LINE = 511
HISTORY_FILE = ".hist_list"
ALIAS_FILE = ".aliases"


def _prompt(out: TextIO) -> None:
    out.write(f"${os.getcwd()}> ")
    out.flush()


def run_loop(shell: Shell, stream: TextIO, out: TextIO) -> bool:
    """Read and run commands until ``exit`` or end of input.

    Returns True if the loop ended on ``exit``, False on end of input.
    """
    _prompt(out)
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        tokens = parse(line[:MAX_LINE])
        if tokens and tokens[0] == "exit":
            if len(tokens) > 1:
                out.write("Too many parameters. Please just type 'exit'\n")
            out.write("Exiting shell...\n")
            return True
        if tokens:
            shell.run(tokens, True, 0)
        _prompt(out)
    out.write("\nExiting shell...\n")
    return False


def _load(store, path: Path, what: str) -> None:
    try:
        count = store.load(path)
    except OSError as exc:
        print(f"Error - could not open {what} file: {exc.strerror}", file=sys.stderr)
        return
    except ShellError as exc:
        print(exc, file=sys.stderr)
        return
    print(f"Loaded {count} commands from {what} file {path.name}")


def _save(store, path: Path, label: str) -> None:
    try:
        store.save(path)
    except OSError as exc:
        print(f"Error - could not open history file: {exc.strerror}", file=sys.stderr)
        return
    print(f"{label} saved to {path.name}")


def main(argv=None) -> int:
    """Start the shell in the home directory; command-line arguments are ignored."""
    home = Path(os.environ.get("HOME") or Path.home())
    original_path = os.environ.get("PATH")
    try:
        os.chdir(home)
    except OSError:
        pass

    history = History()
    aliases = AliasTable()
    _load(history, home / HISTORY_FILE, "history")
    _load(aliases, home / ALIAS_FILE, "alias")

    shell = Shell(history, aliases, sys.stdout, sys.stderr)
    run_loop(shell, sys.stdin, sys.stdout)

    _save(history, home / HISTORY_FILE, "History")
    _save(aliases, home / ALIAS_FILE, "Aliases")

    if original_path is None:
        os.environ.pop("PATH", None)
    else:
        os.environ["PATH"] = original_path
    sys.stdout.write(f"System path {original_path} restored")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())