# miniformat

A small pure-Python library of C-style character, byte-buffer and string
helpers, plus a minimal printf-like formatter supporting the conversions
`%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`. It has no
dependencies beyond the standard library.

## Installation

```
pip install miniformat
```

To run the tests:

```
pip install "miniformat[test]"
pytest
```

## Modules

### `miniformat.chars`

ASCII classification and case conversion. Each function takes a
one-character string or an integer code point: `is_alpha`, `is_digit`,
`is_alnum`, `is_ascii`, `is_print` return booleans; `to_upper` and
`to_lower` return a value of the same kind they were given, unchanged when
it is not an ASCII letter of the other case.

### `miniformat.memory`

Operations on the leading `n` bytes of `bytearray` or `memoryview` buffers:
`memset`, `bzero`, `memcpy`, `memmove` (safe for overlapping views),
`memchr` (index of the first match or `None`), `memcmp` (difference of the
first mismatching bytes) and `calloc` (a zero-filled `bytearray`). A negative
count, or one larger than a buffer, raises `ValueError`; `calloc` raises
`OverflowError` when the total exceeds 64 bits.

### `miniformat.strings`

String utilities: `strlen`, `strchr`, `strrchr` and `strnstr` (return an
index or `None`; searching for NUL in `strchr`/`strrchr` gives the string's
length), `strncmp`, `atoi` (leading whitespace, optional sign, digits up to
the first non-digit), `substr`, `strjoin`, `strtrim`, `split` (drops empty
pieces), `itoa`, `strmapi` and `striteri` (calls `func(index, char)` on a
mutable sequence of characters, storing any non-`None` result in place).

`strlcpy(src, size)` and `strlcat(dest, src, size)` return a `Bounded`
named tuple of the resulting `text` and the `length` the operation tried to
produce, so truncation shows as `length >= size`.

### `miniformat.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a given text
stream, or to `sys.stdout` when none is given. `put_str` and `put_endl`
write nothing for `None`.

### `miniformat.formatting`

- `format_char`, `format_str`, `format_pointer`, `format_signed`,
  `format_unsigned`, `format_hex` render one value each.
- `format_conversion(spec, arg)` renders a single conversion character.
- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, stream=None)` writes it and returns the number of
  characters written.

Behaviour worth knowing:

- A `None` string formats as `(null)`; a zero or `None` pointer as `(nil)`.
- `%d`/`%i` wrap to a signed 32-bit value, `%u`/`%x`/`%X` to an unsigned
  32-bit value, and `%p` to an unsigned 64-bit address.
- An integer passed to `%c` contributes its low byte.
- An unknown conversion produces nothing and consumes no argument; a lone
  `%` at the end of the format is ignored.
- Text after a NUL character in the format or in a `%s` argument is dropped.
- Surplus arguments are ignored; too few raise `TypeError`.

## Example

```python
from miniformat.formatting import sprintf, printf
from miniformat.strings import split, itoa, strlcpy

text = sprintf("%s has %d items (0x%x), %u%%", "cart", 42, 255, 7)
# 'cart has 42 items (0xff), 7%'

count = printf("ptr=%p null=%p\n", 0x7FFE1234, 0)
# prints 'ptr=0x7ffe1234 null=(nil)' and returns 26

split("  a  b c ", " ")   # ['a', 'b', 'c']
itoa(-2147483648)         # '-2147483648'
strlcpy("hello", 3)       # Bounded(text='he', length=5)
```

## What it does not do

This is a library only; it installs no command-line program. The formatter
handles exactly the conversions listed above: there are no flags, field
widths, precisions or length modifiers, and no floating-point conversions.