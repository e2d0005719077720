"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO, Union

from .chars import itoa

CharLike = Union[str, int]


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character, given as a string or an integer code."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        c = chr(c)
    elif not isinstance(c, str):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` up to its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    end = s.find("\0")
    stream.write(s if end < 0 else s[:end])


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n``."""
    stream.write(itoa(n))