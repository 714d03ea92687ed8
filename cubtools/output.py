"""Writing characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional, Union

Char = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _terminated(s: str) -> str:
    end = s.find("\0")
    return s if end == -1 else s[:end]


def putchar_fd(c: Char, fd: int) -> None:
    """Write one character to ``fd``.

    An integer is written as the single byte it names (modulo 256); a
    one-character string is written in UTF-8.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([int(c) & 0xFF]))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its terminator to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _terminated(s).encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _write_all(fd, _terminated(s).encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of ``n`` to ``fd``."""
    _write_all(fd, f"{int(n):d}".encode("ascii"))