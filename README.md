# kutil

A handful of small helpers with no dependencies beyond the standard library:

- `kutil.kerr`: `KError`, an exception that records the file and line it was
  created at. `panic()` reports an error and shuts the program down by raising
  `Panic`.
- `kutil.kout`: `Outcome`, a value that holds either data or an error.
- `kutil.kstr`: `KStr`, a UTF-8 string you walk with a byte cursor, one
  character at a time, forwards or backwards.
- `kutil.kbg`: helpers that format or print a single byte in hex, in binary or
  as a character.

## Install

```
pip install .
```

## Errors that know where they came from

```python
from kutil.kerr import KError

err = KError.here("disk full")
print(err.message, err.file, err.line)
err.dbg()   # prints "🚨 (<file> <line>) disk full"
```

`KError(message, file, line)` builds one with an explicit location, and
`KError.here(message)` takes the caller's file and line. `str(err)` gives
`"(<file> <line>) <message>"`. `is_empty()` is true when the message is empty.
`dbg(file=None)` prints the error to the given stream, or to standard output.

`panic(message)` prints an error located at its caller, followed by
`💣 PANICKING! SHUTTING DOWN..`, to standard output and raises `Panic`. `Panic`
is a subclass of `SystemExit` with exit status 1, and its `error` attribute
holds the `KError`.

## Outcomes

```python
from kutil.kerr import KError
from kutil.kout import Outcome

out = Outcome.fail(KError.here("bad input"))
if out.is_err():
    print(out.get_err().message)

ok = Outcome.ok(42)
print(ok.get_data())   # 42
```

An `Outcome` is a frozen dataclass with the fields `err` and `data`. It counts
as an error whenever `err` is not `None`. Calling `get_err()` on a successful
outcome, or `get_data()` on a failed one, calls `panic()`.

## Walking a UTF-8 string

```python
from kutil.kstr import KStr

s = KStr("héllo")
s.next()
s.next()
print(s.pos())              # 3: the byte offset of the first "l"
print(s.bytes_from_start()) # b'h\xc3\xa9l': from the start up to and including the cursor byte
s.prev()
s.dbg()
```

`KStr` takes a `str` or `bytes`. Anything after the first NUL byte is dropped
and a NUL terminator is appended. The terminator counts towards `byte_count`
and `char_count`, and the cursor visits it before it reaches the end.

Cursor methods:

- `pos()`, `at_start()`, `at_end()` and `out_of_bounds()` report the cursor's
  state.
- `goto_start()`, `goto_end()` and `goto_pos(pos)` move the cursor. A position
  past the end moves it to the end, and a negative position raises
  `ValueError`.
- `next()`, `next_by(n)`, `prev()` and `prev_by(n)` step the cursor by whole
  characters.
- `current()` returns the byte under the cursor, or 0 once the cursor is past
  the end.

Other methods:

- `last_char()` returns the last byte, which is always the terminator.
- `count_chars()` counts the characters without moving the cursor.
- `bytes_from_rng(start, end)` returns the bytes between two offsets,
  inclusive at both ends and clamped to the string.
- `bytes_from_end()` returns the bytes from the cursor onwards.
- `dbg(file=None)` prints the string's state.

The byte slices never include the terminator.

`utf8_char_length(byte)` returns the length of the UTF-8 sequence that a
leading byte starts, from 1 to 4. It returns 0 for a continuation byte or an
invalid byte.

## Byte debugging

```python
from kutil.kbg import dbg_hex, dbg_bin, dbg_char, hex_line

dbg_hex(0x2A)      # HEX: 0x2A
dbg_bin(5)         # BIN: 00000101
dbg_char("\0")     # CHAR: NULL TERMINATOR
print(hex_line(255))  # HEX: 0xFF
```

`hex_line`, `bin_line` and `char_line` return the text. `dbg_hex`, `dbg_bin`
and `dbg_char` print it to the given stream, or to standard output.

The byte functions accept an int from 0 to 255 or a single-byte `bytes`. The
character functions accept a one-character `str` or a byte value. Any other
value raises `ValueError` or `TypeError`.

## What it does not do

This is a library only. It has no command-line program.

## Tests

```
pip install .[test]
pytest
```