"""String and byte-buffer helpers: parsing, formatting, splitting, trimming and searching.

Strings are plain Python ``str`` values and are assumed to hold no NUL characters.
Search functions return an index into their input, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import List, Optional, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_SPACE = frozenset("\f\n\r\t\v ")

CharLike = Union[int, str]


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer the way two's-complement arithmetic does."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_count(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed int.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A string without digits yields 0.
    """
    _require_str("s", s)
    rest = s.lstrip("".join(_ATOI_SPACE))
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    _require_str("s", s)
    _require_str("sep", sep)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove every leading and trailing character of ``s`` that appears in ``charset``."""
    _require_str("s", s)
    if not charset:
        return s
    return s.lstrip(charset).rstrip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    _require_str("s", s)
    _require_count("start", start)
    _require_count("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0.
    """
    _require_str("haystack", haystack)
    _require_str("needle", needle)
    _require_count("length", length)
    if len(needle) > length:
        return None
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch.

    The end of a string compares as code 0, so a shorter prefix sorts first.
    """
    _require_str("s1", s1)
    _require_str("s2", s2)
    _require_count("n", n)
    padded1 = chain(map(ord, s1), repeat(0))
    padded2 = chain(map(ord, s2), repeat(0))
    for c1, c2 in islice(zip(padded1, padded2), n):
        if c1 != c2 or c1 == 0:
            return c1 - c2
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the byte difference at the first mismatch."""
    _require_count("n", n)
    if n > len(b1) or n > len(b2):
        raise ValueError(f"cannot compare {n} bytes of buffers of {len(b1)} and {len(b2)}")
    for x, y in zip(bytes(b1[:n]), bytes(b2[:n])):
        if x != y:
            return x - y
    return 0


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) among the first ``n``."""
    _require_count("n", n)
    index = bytes(data).find(value & 0xFF, 0, n)
    return None if index < 0 else index


def _search_code(c: CharLike) -> int:
    code = _char_code(c)
    # Truncating remainder, so negative codes stay negative and never match.
    return code % 128 if code >= 0 else -((-code) % 128)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` (code taken modulo 128) in ``s``.

    Searching for code 0 finds the end of the string, at index ``len(s)``.
    """
    _require_str("s", s)
    code = _search_code(c)
    if code < 0:
        return None
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` (code taken modulo 128) in ``s``.

    Searching for code 0 finds the end of the string, at index ``len(s)``.
    """
    _require_str("s", s)
    code = _search_code(c)
    if code < 0:
        return None
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings into a new one."""
    return _require_str("s1", s1) + _require_str("s2", s2)