"""String helpers: length, search, slicing, joining, trimming and splitting.

Functions that work on ``str`` values return new strings or indexes.
``strlcpy``, ``strlcat`` and ``striteri`` work in place on mutable,
NUL-terminated buffers.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return a one-character string from a character or an integer code."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _buffer_length(buffer: BytesLike) -> int:
    """Length of a NUL-terminated byte buffer, or its full length without a NUL."""
    index = bytes(buffer).find(0)
    return len(buffer) if index < 0 else index


def strlen(s: str) -> int:
    """Number of characters before the first NUL (the whole string if none)."""
    index = s.find(_NUL)
    return len(s) if index < 0 else index


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    ch = _char(c)
    end = strlen(s)
    if ch == _NUL:
        return end
    index = s.find(ch, 0, end)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    ch = _char(c)
    end = strlen(s)
    if ch == _NUL:
        return end
    index = s.rfind(ch, 0, end)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return s[:strlen(s)]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; two missing strings give None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None or s2 is None:
        raise TypeError("both strings must be given")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def _check_sep(sep: CharLike) -> str:
    return _char(sep)


def count_words(s: str, sep: CharLike) -> int:
    """Number of non-empty runs of characters other than ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_check_sep(sep)) if word]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, or 0. A string that
    ends first compares as if followed by NUL.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for left, right in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dest``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns the
    length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")
    src_len = _buffer_length(src)
    if size > 0:
        count = min(src_len, size - 1)
        dest[:count] = bytes(src[:count])
        dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append the NUL-terminated ``src`` to the string in ``dest``.

    ``size`` is the full size of ``dest``. Returns the length the combined
    string would have had; when ``dest`` already fills ``size`` bytes,
    returns ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src_len = _buffer_length(src)
    if size == 0:
        return src_len
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")
    dest_len = _buffer_length(dest)
    if dest_len >= size:
        return src_len + size
    count = min(src_len, size - 1 - dest_len)
    dest[dest_len:dest_len + count] = bytes(src[:count])
    dest[dest_len + count] = 0
    return dest_len + src_len


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    buffer: MutableSequence,
    func: Callable[[int, object], object],
) -> None:
    """Call ``func(index, item)`` for each item before the terminator.

    The terminator is a NUL character or a zero byte. A non-None result
    replaces the item in place.
    """
    for index, item in enumerate(buffer):
        if item in (0, _NUL):
            break
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement