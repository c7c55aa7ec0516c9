"""Validation and parsing of the integer arguments given to push_swap."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def is_valid_number(token: str) -> bool:
    """Return True for an optional '+' or '-' followed by one or more ASCII digits."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(ch in _DIGITS for ch in body)


def is_blank(text: str) -> bool:
    """Return True if the text is empty or holds only spaces and tabs."""
    return all(ch in " \t" for ch in text)


def parse_int_strict(token: str) -> int:
    """Convert a signed decimal string, rejecting anything beyond a 64-bit long."""
    sign = 1
    body = token
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body:
        raise ParseError(f"missing digits in {token!r}")
    result = 0
    for ch in body:
        if ch not in _DIGITS:
            raise ParseError(f"invalid character in {token!r}")
        digit = ord(ch) - ord("0")
        if result > (LONG_MAX - digit) // 10:
            raise ParseError(f"number out of range: {token!r}")
        result = result * 10 + digit
    return result * sign


def check_args(args: Iterable[str]) -> None:
    """Reject any argument that is empty or holds only whitespace."""
    for arg in args:
        if is_blank(arg):
            raise ParseError("empty argument")


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Split each argument on spaces and return the distinct integers in order."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for token in (part for part in arg.split(" ") if part):
            if not is_valid_number(token):
                raise ParseError(f"not a number: {token!r}")
            number = parse_int_strict(token)
            if not INT_MIN <= number <= INT_MAX:
                raise ParseError(f"number out of int range: {token!r}")
            if number in seen:
                raise ParseError(f"duplicate number: {number}")
            seen.add(number)
            values.append(number)
    return values