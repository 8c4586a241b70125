"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """The command-line arguments are not a list of distinct integers."""


def is_sign(char: str) -> bool:
    """True for '+' or '-'."""
    return char in ("+", "-") and len(char) == 1


def check_digits(text: str) -> bool:
    """True if ``text`` is optionally signed whole numbers separated by single spaces."""
    length = len(text)

    def at(position: int) -> str:
        return text[position] if position < length else ""

    index = 0
    while index < length:
        if is_sign(at(index)) and at(index + 1) not in ("", " "):
            index += 1
        while at(index).isascii() and at(index).isdigit():
            index += 1
        if at(index) == " " and index != 0 and at(index + 1) not in ("", " "):
            index += 1
        else:
            break
    return index >= length


def build_arg_str(args: Sequence[str]) -> str:
    """Join the arguments with single spaces after checking each one."""
    text = ""
    for arg in args:
        if not check_digits(arg):
            raise ArgumentError(f"not a list of numbers: {arg!r}")
        text = f"{text} {arg}" if text else arg
    return text


def count_numbers(text: str) -> int:
    """Number of numbers in a formatted string: spaces plus one."""
    return text.count(" ") + 1


def atol(text: str) -> int:
    """Convert an optionally signed run of decimal digits to an integer."""
    sign = 1
    digits = text
    if digits and is_sign(digits[0]):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    number = 0
    for char in digits:
        if not ("0" <= char <= "9"):
            raise ArgumentError(f"not a number: {text!r}")
        number = number * 10 + (ord(char) - ord("0"))
    return number * sign


def parse_numbers(text: str) -> list[int]:
    """Convert a space-separated string of numbers into a list of integers."""
    words = [word for word in text.split(" ") if word]
    if len(words) != count_numbers(text):
        raise ArgumentError("empty argument")
    return [atol(word) for word in words]


def check_unique_n_range(numbers: Sequence[int]) -> bool:
    """True if every number fits a 32-bit int and no number repeats."""
    if any(not INT_MIN <= number <= INT_MAX for number in numbers):
        return False
    return len(set(numbers)) == len(numbers)


def parse_args(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return the numbers they hold, top first.

    An empty argument list gives an empty list.
    """
    if not args:
        return []
    numbers = parse_numbers(build_arg_str(args))
    if not check_unique_n_range(numbers):
        raise ArgumentError("numbers must be distinct 32-bit integers")
    return numbers