"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.numbers import itoa

CharLike = Union[str, int]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        c = chr(c)
    elif not isinstance(c, str):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` as it is."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    put_str(s, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(stream).write(itoa(n))