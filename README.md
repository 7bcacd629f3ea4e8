# ftkit

Helpers that behave like the familiar C library routines: character
classification, `atoi`/`itoa` with 32-bit wrap-around, byte-buffer
operations, string functions, a singly linked list, stream output helpers,
and a small `printf` with an optional flag-aware variant.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: `is_digit`, `is_alpha`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes a one-character string or an integer
  code; the case conversions return the same kind of value they were given.
- `ftkit.numbers`: `atoi(text)` skips leading whitespace, accepts one sign,
  reads digits up to the first non-digit and wraps like a 32-bit signed
  integer; `itoa(n)` returns the decimal text and raises `OverflowError`
  outside the 32-bit signed range.
- `ftkit.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove(buf, dest, src, n)` on `bytes`/`bytearray` objects. Positions
  are indices; `memchr` returns an index or `None`. Counts past the end of a
  buffer raise `ValueError`.
- `ftkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `strjoin`, `substr`, `strtrim`, `split`, `strmapi`, `striteri`
  on `str` values (searches return indices or `None`), plus `strlcpy` and
  `strlcat`, which copy NUL-terminated byte strings into a `bytearray` within
  a size limit and return the length they tried to create.
- `ftkit.lists`: `Node` and `LinkedList`, with `push_front`, `push_back`,
  `last`, `len()`, iteration, `for_each`, `map(func, delete)`,
  `clear(delete)` and `remove_first(delete)`. If `func` raises during `map`,
  the contents already produced are passed to `delete` before the exception
  propagates.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing to
  a given text stream or to standard output.
- `ftkit.conversions`: how single values are rendered: `format_string`
  (`(null)` for `None`), `format_pointer` (`0x…`, or `(nil)` for zero or
  `None`), `format_int(nb, base, upper)` and `format_unsigned`.
- `ftkit.printf`: `sprintf(fmt, *args)` and `ft_printf(fmt, *args, stream=None)`
  for `%c %s %p %d %i %u %x %X %%`. An unknown conversion produces nothing and
  takes no argument, a trailing lone `%` is dropped, and a `None` format gives
  an empty string. `ft_printf` returns the number of characters written.
  Too few arguments raise `TypeError`.
- `ftkit.printf_flags`: the same conversions with the `#`, ` ` and `+` flags,
  through `parse_directive`, `Directive`, `render`, `sprintf_flags` and
  `ft_printf_flags`. Repeated flags, and ` ` combined with `+`, produce
  warnings, passed to the `warn` callable or written to standard error. `#`
  on anything but `x`/`X`, `+` on anything but `d`/`i`, or a format ending
  after the flags raises `FormatError`; `ft_printf_flags` writes `ERROR` and a
  newline before raising. In this variant `%%` takes an argument and prints
  it as a character.

## Example

```python
import io

from ftkit.printf import sprintf, ft_printf
from ftkit.printf_flags import sprintf_flags
from ftkit.strings import split

sprintf("%d items at %p", 3, 255)   # '3 items at 0xff'
sprintf_flags("%#x %+d", 255, 7)    # '0xff +7'
split("a,,b,c", ",")                # ['a', 'b', 'c']

buffer = io.StringIO()
count = ft_printf("%s!\n", "hello", stream=buffer)   # count == 7
```

## What it does not do

This is a library only; it installs no command-line program. The `printf`
functions support no field width, precision or length modifiers, and no
floating-point conversions.