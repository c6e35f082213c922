"""Predicates and conversions for the basic (portable) character set.

Only ASCII letters, digits and the six C whitespace characters are
recognised. Bytes above 0x7F and non-ASCII characters are never treated
as letters or spaces and are left unchanged by the case conversions.

Single characters may be given as an ``int`` byte value (0..255) or as a
one-character ``str``; conversions return the same kind they were given.
Strings may be ``str``, ``bytes`` or ``bytearray``. As in C strings, a NUL
character ends a string for the comparison and skipping functions.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Union

Char = Union[int, str]
Text = Union[str, bytes, bytearray]

_SPACE_CODES = frozenset(b" \t\n\r\f\v")


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value out of range: {c}")
    return c


def _codes(s: Text):
    """Yield the code of each character of *s*, stopping at a NUL."""
    for ch in s:
        code = ch if isinstance(ch, int) else ord(ch)
        if code == 0:
            return
        yield code


def isblank(c: Char) -> bool:
    """Space or horizontal tab."""
    return _code(c) in (0x20, 0x09)


def iseol(c: Char) -> bool:
    """Line feed or carriage return."""
    return _code(c) in (0x0A, 0x0D)


def isspace(c: Char) -> bool:
    """Blank, end of line, form feed or vertical tab."""
    return _code(c) in _SPACE_CODES


def isdigit(c: Char) -> bool:
    code = _code(c)
    return 0x30 <= code <= 0x39


def isupper(c: Char) -> bool:
    code = _code(c)
    return 0x41 <= code <= 0x5A


def islower(c: Char) -> bool:
    code = _code(c)
    return 0x61 <= code <= 0x7A


def isalpha(c: Char) -> bool:
    return isupper(c) or islower(c)


def isalnum(c: Char) -> bool:
    return isdigit(c) or isalpha(c)


def isxdigit(c: Char) -> bool:
    code = _code(c)
    return (
        0x30 <= code <= 0x39
        or 0x41 <= code <= 0x46
        or 0x61 <= code <= 0x66
    )


def _upper_code(code: int) -> int:
    return code - 0x20 if 0x61 <= code <= 0x7A else code


def _lower_code(code: int) -> int:
    return code + 0x20 if 0x41 <= code <= 0x5A else code


def toupper(c: Char) -> Char:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _upper_code(_code(c))
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _lower_code(_code(c))
    return chr(code) if isinstance(c, str) else code


def _casecmp(s1: Text, s2: Text, limit: int | None) -> int:
    c1 = c2 = 1
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    remaining = limit
    while c1 and c2 and c1 == c2 and remaining != 0:
        a, b = next(pairs, (0, 0))
        c1, c2 = _upper_code(a), _upper_code(b)
        if remaining is not None:
            remaining -= 1
    if c1 == c2:
        return 0
    return 1 if c1 > c2 else -1


def strcasecmp(s1: Text, s2: Text) -> int:
    """Compare ignoring ASCII case; return -1, 0 or 1."""
    return _casecmp(s1, s2, None)


def strncasecmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most *n* characters ignoring ASCII case; return -1, 0 or 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _casecmp(s1, s2, n)


def _terminated(s: Text) -> Text:
    nul = "\0" if isinstance(s, str) else b"\0"
    index = s.find(nul)
    return s if index < 0 else s[:index]


def _is_space_item(item) -> bool:
    return (item if isinstance(item, int) else ord(item)) in _SPACE_CODES


def skip_ws(s: Text) -> Text:
    """Return *s* without its leading whitespace."""
    s = _terminated(s)
    index = next((i for i, ch in enumerate(s) if not _is_space_item(ch)), len(s))
    return s[index:]


def skip_nonws(s: Text) -> Text:
    """Return *s* from its first whitespace character on."""
    s = _terminated(s)
    index = next((i for i, ch in enumerate(s) if _is_space_item(ch)), len(s))
    return s[index:]


def trunc_rws(s: Text) -> Text:
    """Return *s* without its trailing whitespace."""
    end = len(s)
    while end > 0 and _is_space_item(s[end - 1]):
        end -= 1
    return s[:end]


def convert_to_lower(s: Text) -> Text:
    """Return *s* with ASCII letters lower-cased."""
    if isinstance(s, str):
        return "".join(chr(_lower_code(ord(ch))) if ord(ch) <= 0xFF else ch for ch in s)
    return type(s)(_lower_code(b) for b in s)


def convert_to_upper(s: Text) -> Text:
    """Return *s* with ASCII letters upper-cased."""
    if isinstance(s, str):
        return "".join(chr(_upper_code(ord(ch))) if ord(ch) <= 0xFF else ch for ch in s)
    return type(s)(_upper_code(b) for b in s)