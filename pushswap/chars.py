"""Character classification and case conversion for single characters."""

from __future__ import annotations

CharLike = str | int


def _code(char: CharLike) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError("expected a character or an integer code")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(char: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(char)
    return ord("0") <= code <= ord("9")


def is_alnum(char: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    code = _code(char)
    return ord(" ") <= code <= ord("~")


def to_upper(char: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return _same_kind(char, code)


def to_lower(char: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return _same_kind(char, code)