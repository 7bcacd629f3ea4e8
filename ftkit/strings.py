"""String utilities modelled on the classic C string routines.

Text functions work on Python ``str`` values and report positions as
indices instead of pointers. ``strlcpy`` and ``strlcat`` work on
NUL-terminated byte buffers, since the point of those routines is
bounded copying into a fixed-size buffer.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]
Buffer = Union[bytes, bytearray, memoryview]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _c_length(buf: Buffer) -> int:
    """Length of the NUL-terminated string held in ``buf``."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index < 0 else index


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch,
    where the end of a string counts as code 0, or 0 if they match.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for pos in range(n):
        left = ord(s1[pos]) if pos < len(s1) else 0
        right = ord(s2[pos]) if pos < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. Returns None when absent.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return str(s)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be str")
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove the characters of ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence, func: Callable[[int, object], object]) -> MutableSequence:
    """Apply ``func(index, item)`` to each item of ``buf`` in place.

    When ``func`` returns a value other than None, that value replaces
    the item. Returns ``buf``.
    """
    for index, item in enumerate(buf):
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement
    return buf


def strlcpy(dest: bytearray, src: Buffer, size: int) -> int:
    """Copy the C string in ``src`` into ``dest``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns
    the length of ``src``, so a result of ``size`` or more means the copy
    was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"destination holds {len(dest)} bytes, size is {size}")
    src_len = _c_length(src)
    if size > 0:
        count = min(src_len, size - 1)
        dest[:count] = bytes(src[:count])
        dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: Buffer, size: int) -> int:
    """Append the C string in ``src`` to the one in ``dest``, within ``size`` bytes.

    Returns the length of the string it tried to create: the initial
    length of ``dest`` plus the length of ``src``, or ``size`` plus the
    length of ``src`` when ``dest`` already fills ``size`` bytes.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"destination holds {len(dest)} bytes, size is {size}")
    dest_len = _c_length(dest)
    src_len = _c_length(src)
    if size <= dest_len:
        return size + src_len
    count = min(src_len, size - 1 - dest_len)
    dest[dest_len:dest_len + count] = bytes(src[:count])
    dest[dest_len + count] = 0
    return dest_len + src_len