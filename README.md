# tinyshell

A small interactive command shell. It runs external programs, understands
a handful of built-in commands, keeps a history of what you typed and lets
you define aliases.

## Installing

```
pip install .
```

## Starting the shell

```
tinyshell
```

The same loop can be started with `python -m tinyshell.cli`. Command-line
arguments are ignored.

On start the shell moves to your home directory (`$HOME`) and loads any
saved history and aliases from there, reporting how many entries it loaded
or why a file could not be read. The prompt shows the current directory:

```
$/home/you>
```

Type `exit` or press Ctrl+D to leave. `exit` followed by anything else
prints a warning and still exits. On leaving, the history and aliases are
saved again and the `PATH` the shell started with is restored and printed.

## Input

A line is split into words at spaces, tabs and the characters
`| < > ; &`; runs of these count as one separator. Only the first 511
characters of a line are read. Those characters have no other meaning.

## Built-in commands

| Command | What it does |
| --- | --- |
| `cd [dir]` | Change directory; without an argument, go to `$HOME` |
| `getpath` | Print the current `PATH` |
| `setpath <path>` | Set `PATH` for this session |
| `history` | List the history (up to 20 commands), numbered from 1 |
| `!!` | Run the most recent command again |
| `!<n>` | Run command number `n` from the history |
| `!-<n>` | Run the command `n` places back in the history (`!-1` is the latest) |
| `alias` | List all aliases |
| `alias <name> <command> [args...]` | Define or overwrite an alias (at most 10) |
| `unalias <name>` | Remove an alias |
| `exit` | Leave the shell |

Anything else is run as an external program found on `PATH`, and the shell
waits for it to finish. Errors such as a wrong number of arguments, an
unknown directory or a bad history number are printed to standard error.

Every command you type is added to the history, oldest entries dropping
out once it holds 20. `history` is recorded before it prints, so it shows
itself. Commands recalled with `!` are not added again. An alias may
expand to another alias, up to three levels deep; deeper expansion stops
with "Alias loop limit reached". Any extra words typed after an alias name
are added to the end of its expansion.

## Saved state

The history is written to `~/.hist_list` and the aliases to `~/.aliases`.
Each file starts with a line holding the number of entries, followed by
one command per line, its words joined by single spaces. An alias line
starts with the alias name.

## What it does not do

There are no pipes, redirections, background jobs, quoting, variable
expansion or globbing: every word is passed to the program as it was typed.

## Using it from Python

The pieces can be used on their own:

```python
from tinyshell.parsing import parse, ShellError
from tinyshell.history import History
from tinyshell.aliases import AliasTable

parse("ls -l | wc")          # ['ls', '-l', 'wc']

history = History(20)
history.add(["ls", "-l"])
history.get(1)               # ['ls', '-l']
history.recent(1)            # ['ls', '-l']
history.format()             # '1: ls -l \n'

aliases = AliasTable(10)
aliases.add("ll", ["ls", "-l"])   # False: a new alias
aliases.lookup("ll")              # ['ls', '-l']
"ll" in aliases                   # True
aliases.remove("ll")
```

`History` and `AliasTable` both have `save(path)` and `load(path)`;
`load` replaces the contents and returns the number of entries read.
`AliasTable.add` and `AliasTable.remove` raise `ShellError` when the table
is full, empty, or has no such alias.

`tinyshell.shell.Shell(history, aliases, out, err)` ties them together:
`Shell.run(tokens)` runs one tokenised command, writing to `out` and
reporting errors to `err`. `tinyshell.cli.run_loop(shell, stream, out)`
drives a shell from a stream of input lines and returns True if it ended
on `exit`, False at end of input.

## Running the tests

```
pip install ".[test]"
pytest
```