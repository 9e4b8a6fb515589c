from __future__ import annotations

COMMANDS = frozenset("><+-,.[]")


def filter_commands(source: str) -> str:
    """Drop every character that is not one of the eight commands.

    Comments, whitespace and newlines vanish; the relative order of the
    remaining commands is preserved.
    """
    return "".join(ch for ch in source if ch in COMMANDS)


__all__ = ["COMMANDS", "filter_commands"]
