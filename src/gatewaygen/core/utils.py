"""
Utility functions for the emitters.

Identifier escaping for generated Python source.
"""

from __future__ import annotations

import keyword
import re

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_INVALID_CHAR_PATTERN = re.compile(r"[^A-Za-z0-9_]")


def escape_identifier(name: str) -> str:
    """
    Make a name usable as a Python identifier.

    Examples:
        ASTRONAUTS -> ASTRONAUTS
        None       -> None_
        class      -> class_
        2FA        -> _2FA
        my-graph   -> my_graph
    """
    if not _IDENTIFIER_PATTERN.match(name):
        name = _INVALID_CHAR_PATTERN.sub("_", name)
        if not name or name[0].isdigit():
            name = f"_{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    return name
