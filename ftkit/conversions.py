"""Text forms of the values handled by the printf-style formatters."""

from __future__ import annotations

import operator
from typing import Optional, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINTPTR_MASK = 2**64 - 1
_UINT32_MASK = 2**32 - 1


def _int32(value: int) -> int:
    """Reduce ``value`` to a 32-bit signed integer, as a C ``int`` argument."""
    value = operator.index(value) & _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _uint32(value: int) -> int:
    """Reduce ``value`` to a 32-bit unsigned integer, as a C ``unsigned int``."""
    return operator.index(value) & _UINT32_MASK


def _char(value: Union[str, int]) -> str:
    """Return the single character a ``%c`` argument stands for."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(operator.index(value) & 0xFF)


def format_string(s: Optional[str]) -> str:
    """Return ``s`` itself, or ``(null)`` when there is no string."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected str or None, got {type(s).__name__}")
    return s


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    if address is None:
        return "(nil)"
    value = operator.index(address) & _UINTPTR_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format_int(value, 16)


def format_int(nb: int, base: int = 10, upper: bool = False) -> str:
    """Return ``nb`` written in ``base`` (2 to 16), with a leading '-' when negative."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    nb = operator.index(nb)
    if nb < 0:
        return "-" + format_int(-nb, base, upper)
    symbols = _UPPER_DIGITS if upper else _LOWER_DIGITS
    digits = []
    while True:
        nb, remainder = divmod(nb, base)
        digits.append(symbols[remainder])
        if nb == 0:
            break
    return "".join(reversed(digits))


def format_unsigned(nb: int) -> str:
    """Return the decimal text of ``nb`` taken as a 32-bit unsigned integer."""
    return str(_uint32(nb))