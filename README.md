# ftkit

A small toolkit of everyday helpers with precise, predictable semantics.
It has no dependencies beyond the standard library.

## Modules

- `ftkit.convert`: character class tests `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii` and `is_print` (each takes a one-character string or an integer
  code), case mapping with `to_lower` / `to_upper`, and integer conversion
  with `atoi` and `itoa`. `atoi` skips leading whitespace, reads one optional
  sign and the digits that follow, and wraps the result like a 32-bit signed
  integer; `itoa` raises `OverflowError` outside the 32-bit signed range.
- `ftkit.memory`: byte-buffer helpers `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` and `memset` working on `bytes`, `bytearray` and
  `memoryview`. A length that is negative or longer than a buffer raises
  `ValueError`. `memchr` returns an index or `None`.
- `ftkit.strings`: `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strncpy`, `strlcpy`, `strlcat`, `strnstr`, `strjoin`, `substr`, `strtrim`,
  `split`, `strmapi` and `striteri`. Searches return the suffix of the string
  starting at the match, or `None`. `strlcpy` and `strlcat` return the new
  text together with the length they tried to create. `split` drops empty
  pieces.
- `ftkit.linked`: a singly linked `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing to
  any text stream (standard output by default).
- `ftkit.printf`: `sprintf` and `printf` supporting `%c %s %p %d %i %u %x %X %%`,
  plus `format_unsigned`, `format_hex` and `format_pointer`. An unknown
  conversion renders as `0`, a `None` string as `(null)` and a null pointer as
  `(nil)`. `printf` writes to standard output and returns the length written.
- `ftkit.lines`: `LineReader` reads a text or binary stream in chunks of
  `buffer_size` (1 by default) and returns one line at a time, newline kept;
  `read_lines` yields every line of a stream.

## Installation

```
pip install .
```

## Examples

```python
import io

from ftkit.convert import atoi, itoa
from ftkit.lines import read_lines
from ftkit.linked import LinkedList
from ftkit.printf import sprintf
from ftkit.strings import split, strtrim

atoi("  -42abc")          # -42
itoa(-7)                  # "-7"
split("a,,b,c", ",")      # ["a", "b", "c"]
strtrim("xxhixx", "x")    # "hi"
sprintf("%d%% of %x", 50, 255)   # "50% of ff"

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda v: v * 2, None))   # [0, 2, 4, 6]

list(read_lines(io.StringIO("one\ntwo")))   # ["one\n", "two"]
```

## What it does not do

ftkit is a library only: it installs no command and has no graphical or
interactive program. `printf` supports no flags, widths or precisions.

## Running the tests

```
pip install .[test]
pytest
```