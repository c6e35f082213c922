# aspellkit

Small, dependency-free building blocks used around a spell checker.

## Modules

### `aspellkit.bcs`

Predicates and case conversion limited to the basic (ASCII) character set.
Characters may be an `int` byte value or a one-character `str`; strings may
be `str`, `bytes` or `bytearray`. A NUL ends a string for the comparison and
skipping functions.

- `isblank`, `iseol`, `isspace`, `isdigit`, `isupper`, `islower`,
  `isalpha`, `isalnum`, `isxdigit`
- `toupper`, `tolower` — return the same kind of value they were given
- `strcasecmp(s1, s2)`, `strncasecmp(s1, s2, n)` — return -1, 0 or 1
- `skip_ws`, `skip_nonws`, `trunc_rws`, `convert_to_lower`,
  `convert_to_upper` — return new strings

### `aspellkit.region`

`Region(data)` is a read-only view over a bytes-like object with `size`,
`check(offset, size)`, `offset(pos)`, `peek8`, `peek16`, `peek32` (native
byte order; `IndexError` when out of range) and `subregion(offset, size)`
(`ValueError` when it does not fit).

### `aspellkit.memstream`

`MemoryStream(data)` is a cursor over bytes or a `Region`:

- `getln()` returns the next line with its end-of-line byte, or `None`;
  iterating a stream yields its lines. `getln_region()` returns a `Region`.
- `matchline(key, case_sensitive=True)` finds the next line whose first word
  is `key`, ignoring `#` comments and blank lines, and returns the rest of
  the line with surrounding whitespace removed, or `None`.
- `chr(ch)` reads up to the next `ch` and returns `(region, found)`, or
  `None` at the end.
- `getc`, `ungetc`, `peek`, `skip_ws`, `getregion(size)`.
- `iseof`, `tell`, `rewind`, `remainder`, `seek(pos, whence)` (`ValueError`
  when the target lies outside the stream).
- `get8`, `get16`, `get32` read native-order integers and raise `EOFError`
  when too few bytes remain. Note that `get8` moves the position on by two
  bytes.

### `aspellkit.dirent`

`opendir(path)` returns a `Directory`, a snapshot of the listing taken when it
is opened: `.` and `..` first, then the names in sorted order. Each
`DirEntry` has a `name`, a `FileType` (`LNK`, `CHR`, `DIR` or `REG`) and
`namelen`. `Directory` offers `read()`, `seek(offset)`, `rewind()`,
`tell()` (the number of entries), `close()`, iteration and use as a context
manager. A path that cannot be listed raises `FileNotFoundError`; using a
closed directory raises `OSError` with `EBADF`.

### `aspellkit.dirs`

`unixpath(path)` turns each run of `/` or `\` into one `/`.
`install_dir(module_path)` drops the file name and a final `bin` directory.

`DirectoryResolver(module_path, program_files, common_appdata, registry,
environ, home)` works out `prefix_dir()`, `conf_dir()` (`etc`),
`data_dir()` (`share`), `dict_dir()` (`dict`, else the data directory),
`locale_dir()` (`locale`) and `home_dir()`. Each directory is looked for next
to `module_path`, then in the `registry` mapping (`Data`, `Dictionaries`),
then under `program_files` and `common_appdata`, and otherwise a default
under the program-files folder is created. Results are cached.
`set_environment(locale_name)` fills in `HOME`, and `LANG` when none of
`LC_MESSAGES`, `LANGUAGE` and `LANG` is set.

### `aspellkit.textdomain`

`gettext_init(resolver=None)` binds the `aspell` message domain to the
resolver's locale directory on its first call only, and returns the bound
directory.

## What this package does not do

It checks no spelling, loads no dictionaries and has no command-line
program; it only provides the helpers listed above.

## Installation

```
pip install .
```

## Examples

```python
from aspellkit.memstream import MemoryStream

stream = MemoryStream(b"# settings\nlang  en_US\nencoding utf-8\n")
print(stream.matchline("LANG", case_sensitive=False))  # b'en_US'
```

```python
from aspellkit.dirent import opendir

with opendir(".") as directory:
    for entry in directory:
        print(entry.name, entry.type.name)
```

```python
from aspellkit.dirs import unixpath

print(unixpath("C:\\Program Files\\\\Aspell"))  # C:/Program Files/Aspell
```

## Running the tests

```
pip install .[test]
pytest
```