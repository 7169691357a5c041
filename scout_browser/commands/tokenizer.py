from __future__ import annotations

import shlex
from typing import List


def tokenize(line: str) -> List[str]:
    """
    Split a command line into words, keeping quoted phrases together.

    "group add 'my picks' 254" -> ["group", "add", "my picks", "254"]

    An unterminated quote falls back to plain whitespace splitting instead of failing.
    """
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()
