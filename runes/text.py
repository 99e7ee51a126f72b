"""Small string helpers used by the Runescript parser."""

from __future__ import annotations

_WHITESPACE = " \t\r\n"


def trim(s: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return s.strip(_WHITESPACE)


def parse_string(s: str) -> str:
    """Return the contents of the first double-quoted string in ``s``.

    A backslash escapes the next character; ``\\n`` becomes a newline.
    The string ends at the first unescaped quote or at the end of ``s``.
    If ``s`` holds no quote at all, the result is empty.
    """
    start = s.find('"')
    if start == -1:
        return ""

    result: list[str] = []
    chars = iter(s[start + 1 :])
    for char in chars:
        if char == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            result.append("\n" if escaped == "n" else escaped)
        elif char == '"':
            break
        else:
            result.append(char)
    return "".join(result)


def split(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on ``delimiter``, dropping a single trailing empty field."""
    parts = s.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts