# runes

`runes` is a small task runner. It reads a file named `Runescript` in the
current directory and runs the *spells* (named lists of commands) that it
declares.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
runes                       # casts the spell named "all"
runes cast build            # casts the spell "build"
runes cast build cast test  # casts "build", then "test"
```

`python -m runes.cli` does the same as `runes`.

- If no regular file named `Runescript` is in the current directory, `runes`
  prints `Didn't find "Runescript".` on standard error and exits with
  status 1.
- `cast` given as the last argument, with no spell name after it, prints
  `Usage: runes cast <spell>` and exits with status 1.
- Arguments other than `cast <spell>` are ignored.
- A spell name that is not defined is reported on standard error and
  skipped; the remaining spells are still cast.
- Otherwise `runes` exits with status 0. The exit status of the shell
  commands that spells run does not change this.

## The Runescript format

```
#define CC = gcc
#include "common.runes"

spell all
{
    cast build
}

spell build
{
    out = app
    ! ${CC} -o ${out} main.c
}

spell "greet"
{
    $ echo hello ${who}
}

spell hello
{
    cast greet who = world
}
```

Blank lines are skipped and every line is trimmed of surrounding spaces,
tabs and line-break characters.

### Top-level lines

- `spell <name>` starts a spell. Its commands are the following lines up to
  a line holding only `}`; lines holding only `{` are skipped. A name in
  double quotes may contain any characters (with `\"`, `\\` and `\n`
  escapes); otherwise the name is the run of ASCII letters and digits at the
  start, up to the first other character.
- `#define NAME = value` declares a constant.
- `#include "path"` reads another Runescript, with the path taken relative
  to the current directory, and merges its constants and spells in. A file
  that cannot be opened is reported on standard error and skipped. Spells
  defined in the including file replace included spells of the same name.
- Any other line is reported on standard error as unhandled.

### Lines inside a spell

- `! command` prints the command with its references expanded and then runs
  it in the system shell.
- `$ command` expands and runs the command without printing it.
- `name = value` sets a variable that is local to this cast of the spell.
- `cast <spell> [name = value, ...]` casts another spell, whose variables
  start out as exactly the given arguments. An argument's value may refer to
  constants and to arguments earlier in the same list, but not to the
  calling spell's variables. An argument without `=` sets a variable named
  by the whole argument to that same text. An unknown spell is reported and
  skipped.
- Any other line is reported on standard error as an unknown command.

### References

Within commands and values, `${name}` is replaced by the spell variable of
that name, or by the constant of that name if there is no such variable. An
unknown name is reported on standard error and expands to nothing. `$$`
stands for a literal `$`, and a `$` before any other character is dropped.
A `${` with no closing `}` raises `ValueError`.

## Library use

```python
from runes.runescript import load_runescript
from runes.spell import cast_spell, seek_spell

script = load_runescript("Runescript")
spell = seek_spell(script.spells, "build")
if spell is not None:
    variables = cast_spell(script.spells, script.constants, spell)
```

The modules:

- `runes.runescript` — `Runescript` (a dataclass holding `constants`, a
  dict of strings, and `spells`, a dict of `Spell`), `parse_runescript(lines)`
  which parses any iterable of lines, and `load_runescript(path)` which
  reads a file and raises `OSError` if it cannot be opened.
- `runes.spell` — `Spell` (a dataclass with `name` and `commands`),
  `parse_name`, `parse_spell`, `map_spells`, `seek_spell`,
  `expand(text, variables, constants)` and
  `cast_spell(spells, constants, spell, variables=None)`, which runs a
  spell's commands and returns its final variables.
- `runes.shell` — `shell(cmd)` runs a command in the system shell and
  returns its exit status.
- `runes.text` — `trim`, `parse_string` and `split` string helpers.
- `runes.cli` — `find_runescript(directory=None)`, `parse_casts(args)` and
  `main(argv=None)`.

## Limitations

- There is no way to set spell variables or constants from the command
  line; only `cast <spell>` arguments are understood.
- A failing shell command does not stop a spell; the next command runs
  regardless.
- The only file looked for is `Runescript` in the current directory; parent
  directories are not searched.