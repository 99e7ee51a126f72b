"""Spells: named lists of commands, and how they are cast."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .shell import shell
from .text import parse_string, trim

_REFERENCE = re.compile(r"\$(?:\{([^}]*)(\}?)|(.?))", re.DOTALL)


@dataclass
class Spell:
    """A named sequence of command lines."""

    name: str
    commands: list[str] = field(default_factory=list)


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def _split_name(text: str) -> tuple[str, str]:
    """Split a leading spell name off ``text``; return the name and the rest."""
    if text.startswith('"'):
        name = parse_string(text)
        rest = text[1:]
        escaped = False
        for index, char in enumerate(rest):
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                return name, rest[index + 1 :]
        return name, ""
    match = re.match(r"[A-Za-z0-9]*", text)
    name = match.group(0) if match else ""
    return name, text[len(name) :]


def parse_name(header: str) -> str:
    """Return the spell name at the start of ``header``.

    A quoted name is read as a string; otherwise the leading run of ASCII
    letters and digits is the name.
    """
    return _split_name(header)[0]


def parse_spell(lines: Iterable[str], header: str) -> Spell:
    """Read a spell body from ``lines`` up to its closing brace.

    ``lines`` is consumed only as far as the closing ``}`` line, so an
    iterator shared with the caller continues after the spell.
    """
    spell = Spell(parse_name(header))
    for raw in lines:
        line = trim(raw)
        if not line or line == "{":
            continue
        if line == "}":
            break
        spell.commands.append(line)
    return spell


def map_spells(spells: Iterable[Spell]) -> dict[str, Spell]:
    """Index spells by name; a later spell replaces an earlier one."""
    return {spell.name: spell for spell in spells}


def seek_spell(spells: Mapping[str, Spell], name: str) -> Spell | None:
    """Return the spell called ``name``, or None."""
    return spells.get(name)


def expand(
    text: str, variables: Mapping[str, str], constants: Mapping[str, str]
) -> str:
    """Substitute ``${name}`` references in ``text``.

    Variables take precedence over constants. ``$$`` yields a literal
    dollar sign; a ``$`` before any other character is dropped. An unknown
    name expands to nothing and is reported on stderr.
    """

    def substitute(match: re.Match[str]) -> str:
        identifier, closing, other = match.groups()
        if identifier is None:
            return other
        if not closing:
            raise ValueError(f"unterminated variable reference in {text!r}")
        if identifier in variables:
            return variables[identifier]
        if identifier in constants:
            return constants[identifier]
        _warn(f"Unknown variable: {identifier}")
        return ""

    return _REFERENCE.sub(substitute, text)


def _parse_arguments(
    arguments: str, constants: Mapping[str, str]
) -> dict[str, str]:
    """Parse ``name=value, ...`` cast arguments into a variable mapping."""
    assigned: dict[str, str] = {}
    for piece in arguments.split(","):
        argument = trim(piece)
        if not argument:
            continue
        name, equal, value = argument.partition("=")
        if not equal:
            value = argument
        assigned[trim(name)] = expand(trim(value), assigned, constants)
    return assigned


def cast_spell(
    spells: Mapping[str, Spell],
    constants: Mapping[str, str],
    spell: Spell,
    variables: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Run every command of ``spell`` and return its final variables.

    ``!cmd`` echoes and runs a shell command, ``$cmd`` runs one quietly,
    ``cast name a=1, b=2`` casts another spell with arguments, and
    ``name = value`` assigns a variable local to this cast.
    """
    scope = dict(variables or {})
    for command in spell.commands:
        if command.startswith("!"):
            line = expand(trim(command[1:]), scope, constants)
            print(line, flush=True)
            shell(line)
        elif command.startswith("$"):
            shell(expand(trim(command[1:]), scope, constants))
        elif command.startswith("cast "):
            name, rest = _split_name(trim(command[5:]))
            target = seek_spell(spells, name)
            if target is None:
                _warn(f"Couldn't find spell '{name}'")
                continue
            arguments = _parse_arguments(trim(rest), constants)
            cast_spell(spells, constants, target, arguments)
        elif "=" in command:
            name, _, value = command.partition("=")
            scope[trim(name)] = expand(trim(value), scope, constants)
        else:
            _warn(f"Unknown command '{command}' in spell {spell.name}")
    return scope