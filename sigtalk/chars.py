"""ASCII character classification and per-character mapping helpers."""

from __future__ import annotations

from typing import Callable, Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def isalpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _convert(c, code - 32)
    return c


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _convert(c, code + 32)
    return c


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character of ``s``."""
    if s is None or func is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(func(index, ch) for index, ch in enumerate(s))