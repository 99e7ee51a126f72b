"""Parsing of Runescript files: constants, spells and includes."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field

from .spell import Spell, map_spells, parse_spell
from .text import parse_string, trim


@dataclass
class Runescript:
    """The constants and spells defined by a Runescript and its includes."""

    constants: dict[str, str] = field(default_factory=dict)
    spells: dict[str, Spell] = field(default_factory=dict)


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def _parse_define(definition: str) -> tuple[str, str]:
    """Split ``name = value`` into a trimmed name and value."""
    name, equal, value = definition.partition("=")
    if not equal:
        return trim(definition), trim(definition)
    return trim(name), trim(value)


def parse_runescript(lines: Iterable[str]) -> Runescript:
    """Parse Runescript source given as lines of text.

    ``spell name { ... }`` blocks define spells, ``#define NAME = value``
    defines constants and ``#include "path"`` merges another file, whose
    path is taken relative to the current directory. Spells defined in this
    source replace included spells of the same name once parsing ends.
    """
    runescript = Runescript()
    spells: list[Spell] = []

    source = iter(lines)
    for raw in source:
        line = trim(raw)
        if not line:
            continue

        if line.startswith("spell "):
            spells.append(parse_spell(source, trim(line[6:])))
            continue

        if line.startswith("#"):
            macro = line[1:]
            if macro.startswith("define "):
                name, value = _parse_define(macro[7:])
                runescript.constants[name] = value
            elif macro.startswith("include "):
                path = parse_string(macro[7:])
                try:
                    included = load_runescript(path)
                except OSError:
                    _warn(f"Couldn't open {path}")
                    continue
                runescript.constants.update(included.constants)
                runescript.spells.update(included.spells)
            continue

        _warn(f'Unhandled line "{line}"')

    runescript.spells.update(map_spells(spells))
    return runescript


def load_runescript(path: str | os.PathLike[str]) -> Runescript:
    """Read and parse the Runescript file at ``path``.

    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        return parse_runescript(handle)