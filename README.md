# ftprint

A small library of C-style helpers for Python: ASCII character classes,
byte-buffer operations, bounded string functions, a singly linked list,
string transformations, simple stream output and a minimal `printf`.

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

### `ftprint.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each accepts a one-character string or an integer code and uses
ASCII rules only. `to_upper` and `to_lower` return a value of the same type
they were given.

### `ftprint.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`, working
on `bytes`, `bytearray` and `memoryview` buffers.

- `memmove(buf, dest, src, n)` moves `n` bytes inside one `bytearray` from
  offset `src` to offset `dest`; overlapping regions are handled.
- `memchr` returns an index, or `None` when the byte is not found.
- `memcmp` returns `0` or the difference of the first differing bytes.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`, and raises
  `MemoryError` when either count exceeds `UINT_MAX`.
- Byte counts larger than a buffer, or negative, raise `ValueError`.

### `ftprint.strings`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
`atoi`, `itoa`.

- Searches return indices, or `None` when nothing is found. Searching for
  `"\0"` gives the length of the string.
- `strlcpy` and `strlcat` return a `Copied(text, length)` named tuple: the
  destination's new content and the length of the string the call tried to
  create.
- `atoi` skips leading whitespace, reads one optional sign and then digits,
  and wraps the result to a 32-bit signed integer.
- `itoa` raises `OverflowError` for values outside the 32-bit signed range.

### `ftprint.transform`

`strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
`split` drops empty pieces; `strmapi` builds a new string from
`func(index, char)`; `striteri` updates a mutable sequence in place, stopping
at the first NUL element.

### `ftprint.linkedlist`

`ListNode` (a dataclass with `content` and `next`) and the helpers `lst_new`,
`lst_add_front`, `lst_add_back`, `lst_size`, `lst_last`, `lst_delone`.
`lst_add_front` and `lst_add_back` return the list's head.

### `ftprint.output`

`put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to the text stream
given as its second argument, or to standard output when none is given, and
returns the number of characters written. `put_str(None)` writes nothing.

### `ftprint.printf`

`render`, `printf`, and the formatters behind them: `format_signed`,
`format_unsigned`, `format_hex`, `format_pointer` and `format_string`.

## printf

`render(fmt, *args)` returns the formatted text. `printf(fmt, *args)` writes
that text to standard output and returns how many characters it wrote.

| spec      | meaning                                          |
|-----------|--------------------------------------------------|
| `%c`      | a single character (string or integer code)      |
| `%s`      | a string; `None` prints `(null)`                 |
| `%d` `%i` | an integer taken as signed 32-bit                |
| `%u`      | an integer taken as unsigned 32-bit              |
| `%x` `%X` | an unsigned 32-bit integer in lower/upper hex    |
| `%p`      | a pointer value as `0x...`; zero or `None` prints `(nil)` |
| `%%`      | a literal percent sign                           |

Any other character after `%` produces nothing and consumes no argument; a
`%` at the very end of the format is dropped. Extra arguments are ignored,
and too few raise `TypeError`.

```python
from ftprint.printf import render, printf

render("%d items at %p", 42, 0xDEAD)   # '42 items at 0xdead'
count = printf("%s!\n", "hello")      # prints 'hello!' and returns 7
```

## What it does not do

`printf` understands only the conversions listed above: there are no flags,
field widths, precisions or length modifiers. The package has no command-line
program; it is used by importing its modules.