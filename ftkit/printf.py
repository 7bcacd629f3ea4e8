"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from ftkit.conversions import (
    _char,
    _int32,
    _uint32,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)

_TAKES_ARGUMENT = frozenset("cspdiuxX")


def _take(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion: str, arg: Any) -> str:
    if conversion == "c":
        return _char(arg)
    if conversion == "s":
        return format_string(arg)
    if conversion in ("d", "i"):
        return format_int(_int32(arg), 10)
    if conversion == "p":
        return format_pointer(arg)
    if conversion == "u":
        return format_unsigned(arg)
    if conversion == "x":
        return format_int(_uint32(arg), 16)
    if conversion == "X":
        return format_int(_uint32(arg), 16, True)
    if conversion == "%":
        return "%"
    return ""


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    An unknown conversion character produces nothing and consumes no
    argument; a lone '%' at the end of ``fmt`` is dropped. A missing
    format gives an empty string.
    """
    if fmt is None:
        return ""
    arguments = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        arg = _take(arguments) if conversion in _TAKES_ARGUMENT else None
        pieces.append(_convert(conversion, arg))
    return "".join(pieces)


def ft_printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)