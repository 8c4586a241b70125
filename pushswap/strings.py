"""String helpers: bounded copy and concatenation, searching, comparison,
conversion between text and integers, slicing, joining, trimming, splitting
and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \f\n\r\t\v")


def _char(char: str | int) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(char, int):
        return chr(char & 0xFF)
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    raise TypeError("expected a character or an integer code")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the new destination and the length of ``src``; with a size of 0
    the destination is left as it was.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new destination and the length the full result would have had.
    """
    _check_non_negative("size", size)
    if size < 1:
        return dest, len(src) + size
    room = max(0, size - 1 - len(dest))
    result = dest + src[:room]
    if size < len(dest):
        return result, len(src) + size
    return result, len(dest) + len(src)


def strchr(text: str, char: str | int) -> int | None:
    """Index of the first occurrence of ``char``; the NUL character matches the end."""
    target = _char(char)
    if target == "\0":
        position = text.find(target)
        return len(text) if position < 0 else position
    position = text.find(target)
    return None if position < 0 else position


def strrchr(text: str, char: str | int) -> int | None:
    """Index of the last occurrence of ``char``; the NUL character matches the end."""
    target = _char(char)
    if target == "\0":
        return len(text)
    position = text.rfind(target)
    return None if position < 0 else position


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the difference of the first mismatch, or 0."""
    _check_non_negative("count", count)
    for index in range(count):
        a = first[index] if index < len(first) else "\0"
        b = second[index] if index < len(second) else "\0"
        if a == "\0" and b == "\0":
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` wholly inside the first ``length`` characters, or None."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    position = haystack[:length].find(needle)
    return None if position < 0 else position


def atoi(text: str) -> int:
    """Parse a leading, optionally signed decimal integer after whitespace.

    Parsing stops at the first non-digit; the result wraps like a 32-bit int.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    number = 0
    while index < len(text) and "0" <= text[index] <= "9":
        number = number * 10 + (ord(text[index]) - ord("0"))
        index += 1
    return _wrap_int32(number * sign)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters in ``charset`` from both ends; ``None`` trims nothing."""
    if text is None:
        raise TypeError("text is required")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str | int) -> list[str]:
    """Split on ``separator``, dropping the empty words runs of it would make."""
    sep = _char(separator)
    return [word for word in text.split(sep) if word]


def itoa(number: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} is outside the 32-bit integer range")
    return str(number)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string of ``func(index, char)`` for every character of ``text``."""
    if text is None or func is None:
        raise TypeError("text and func are required")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every character in place with ``func(index, char)``."""
    if chars is None or func is None:
        raise TypeError("chars and func are required")
    for index, char in enumerate(chars):
        chars[index] = func(index, char)