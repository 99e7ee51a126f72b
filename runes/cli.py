"""Command line entry point: find the Runescript and cast spells from it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .runescript import load_runescript
from .spell import cast_spell, seek_spell

RUNESCRIPT_NAME = "Runescript"
DEFAULT_SPELL = "all"
USAGE = "Usage: runes cast <spell>"


def find_runescript(directory: str | Path | None = None) -> Path | None:
    """Return the path of the Runescript file in ``directory``, or None.

    The current working directory is searched when no directory is given.
    """
    root = Path.cwd() if directory is None else Path(directory)
    for entry in root.iterdir():
        if entry.name == RUNESCRIPT_NAME and entry.is_file():
            return entry
    return None


def parse_casts(args: Sequence[str]) -> list[str]:
    """Collect the spell names given as ``cast <spell>`` in ``args``.

    Other arguments are ignored. With no casts the default spell ``all``
    is returned. Raises ValueError when ``cast`` has no spell after it.
    """
    casts: list[str] = []
    remaining = iter(args)
    for arg in remaining:
        if arg == "cast":
            name = next(remaining, None)
            if name is None:
                raise ValueError("cast needs a spell name")
            casts.append(name)
    return casts or [DEFAULT_SPELL]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``runes`` command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    path = find_runescript()
    if path is None:
        print(f'Didn\'t find "{RUNESCRIPT_NAME}".', file=sys.stderr)
        return 1

    try:
        runescript = load_runescript(path)
    except OSError:
        print(f'Couldn\'t open "{path}"', file=sys.stderr)
        return 1

    try:
        casts = parse_casts(args)
    except ValueError:
        print(USAGE)
        return 1

    for name in casts:
        spell = seek_spell(runescript.spells, name)
        if spell is None:
            print(f"Couldn't find spell '{name}'", file=sys.stderr)
            continue
        cast_spell(runescript.spells, runescript.constants, spell)

    return 0


if __name__ == "__main__":
    sys.exit(main())