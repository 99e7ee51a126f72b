"""A task runner that casts spells of shell commands from a Runescript file."""

__version__ = "0.1.0"
__all__ = ["cli", "runescript", "shell", "spell", "text"]