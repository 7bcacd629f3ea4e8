"""A printf that also understands the '#', ' ' and '+' flags.

Flags may be repeated and combined; repeats and contradictory
combinations produce warnings, and flags that make no sense for the
conversion raise :class:`FormatError`. As in the formatter this follows,
'%%' prints its argument as a character rather than a literal '%'.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, TextIO

from ftkit.conversions import (
    _char,
    _int32,
    _uint32,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)

Warn = Optional[Callable[[str], Any]]

_FLAGS = "# +"
_TAKES_ARGUMENT = frozenset("c%spdiuxX")


class FormatError(ValueError):
    """A conversion directive that cannot be formatted."""


@dataclass(frozen=True)
class Directive:
    """One parsed conversion: its flags, its conversion character and its length.

    ``length`` counts the characters after '%' that the directive takes up.
    """

    specifier: str
    alternate: bool = False
    space: bool = False
    plus: bool = False
    length: int = 1


def _stderr_warning(message: str) -> None:
    sys.stderr.write(message + "\n")


def parse_directive(spec: str, warn: Warn = None) -> Directive:
    """Parse the text following a '%' into a :class:`Directive`.

    Warnings are passed to ``warn``, or written to standard error.
    """
    report = _stderr_warning if warn is None else warn
    flag_count = len(spec) - len(spec.lstrip(_FLAGS))
    flags = spec[:flag_count]
    hashes, spaces, pluses = (flags.count(flag) for flag in _FLAGS)
    conversion = spec[flag_count:flag_count + 1]

    if hashes > 1:
        report("warning: repeated '#' flag in format")
    if spaces > 1:
        report("warning: repeated ' ' flag in format")
    if pluses > 1:
        report("warning: repeated '+' flag in format")
    if spaces > 0 and pluses > 0:
        report("warning: ' ' flag ignored")
    if not conversion:
        raise FormatError("format ends without a conversion character")
    if hashes == 1 and conversion not in ("x", "X"):
        raise FormatError(f"'#' flag used with conversion {conversion!r}")
    if spaces == 1 and conversion not in ("d", "i"):
        report("warning: ' ' flag used with wrong flag")
    if pluses == 1 and conversion not in ("d", "i"):
        raise FormatError(f"'+' flag used with conversion {conversion!r}")

    return Directive(
        specifier=conversion,
        alternate=hashes > 0,
        space=spaces > 0,
        plus=pluses > 0,
        length=flag_count + 1,
    )


def render(directive: Directive, arg: Any = None) -> str:
    """Return the text ``directive`` produces for ``arg``."""
    spec = directive.specifier
    if spec in ("c", "%"):
        return _char(arg)
    if spec == "s":
        return format_string(arg)
    if spec in ("d", "i"):
        nb = _int32(arg)
        sign = ""
        if nb >= 0 and directive.plus:
            sign = "+"
        elif nb >= 0 and directive.space:
            sign = " "
        return sign + format_int(nb, 10)
    if spec == "p":
        return format_pointer(arg)
    if spec == "u":
        return format_unsigned(arg)
    if spec in ("x", "X"):
        nb = _uint32(arg)
        if nb == 0:
            return "0"
        prefix = "0" + spec if directive.alternate else ""
        return prefix + format_int(nb, 16, spec == "X")
    return ""


def _take(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _pieces(fmt: str, args: tuple, warn: Warn) -> Iterator[str]:
    arguments = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        directive = parse_directive(fmt[percent + 1:], warn)
        arg = _take(arguments) if directive.specifier in _TAKES_ARGUMENT else None
        yield render(directive, arg)
        pos = percent + 1 + directive.length


def sprintf_flags(fmt: str, *args: Any, warn: Warn = None) -> str:
    """Return ``fmt`` with its directives, flags included, replaced by ``args``."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    return "".join(_pieces(fmt, args, warn))


def ft_printf_flags(
    fmt: str, *args: Any, stream: Optional[TextIO] = None, warn: Warn = None
) -> int:
    """Write the formatted text to ``stream`` and return the characters written.

    Text before a faulty directive is written, followed by ``ERROR`` and a
    newline, and then :class:`FormatError` is raised.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    target = sys.stdout if stream is None else stream
    count = 0
    try:
        for piece in _pieces(fmt, args, warn):
            target.write(piece)
            count += len(piece)
    except FormatError:
        target.write("ERROR\n")
        raise
    return count