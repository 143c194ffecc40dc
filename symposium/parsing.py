"""Validation and conversion of the command-line arguments."""

from __future__ import annotations

import re

INT_MAX = 2147483647

USAGE = (
    "Usage: ./philo number_of_philosophers time_to_die "
    "time_to_eat time_to_sleep "
    "[number_of_times_each_philosopher_must_eat]"
)

_DIGITS = "0123456789"
_SPACES = " \t\n"
_NUMBER = re.compile(r"[\t\n\v\f\r ]*\+?([0-9]*)[ \t\n]*")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be used."""


def _digit_at(text: str, index: int) -> bool:
    return index < len(text) and text[index] in _DIGITS


def is_well_formed(text: str) -> bool:
    """Tell whether ``text`` looks like an unsigned integer.

    Digits, spaces, tabs and newlines are allowed, as is a ``+`` directly
    before a digit when it opens the text or follows whitespace.  Text that
    is empty or made only of spaces is rejected.
    """
    if not text or text.strip(" ") == "":
        return False
    for index, char in enumerate(text):
        if char in _DIGITS or char in _SPACES:
            continue
        if (
            char == "+"
            and _digit_at(text, index + 1)
            and (index == 0 or text[index - 1] in _SPACES)
        ):
            continue
        return False
    return True


def parse_number(text: str) -> int:
    """Convert ``text`` to a non-negative integer.

    Leading whitespace, one leading ``+`` and trailing blanks are accepted.
    Text without digits gives 0.  Anything else after the digits, or a value
    above ``INT_MAX``, raises ``ValueError``.
    """
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise ValueError(f"malformed number: {text!r}")
    digits = match.group(1)
    value = int(digits) if digits else 0
    if value > INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_arguments(args: list[str]) -> tuple[int, ...]:
    """Check the arguments after the program name and return their values.

    Four or five arguments are expected, each a positive integer no larger
    than ``INT_MAX``.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError(USAGE)
    for arg in args:
        if not is_well_formed(arg):
            raise ArgumentError(f"Error: '{arg}' is not a valid unsigned integer.")
    values = []
    for arg in args:
        try:
            value = parse_number(arg)
        except ValueError:
            value = -1
        if value <= 0:
            raise ArgumentError(
                f"Error: '{arg}' not a valid unsigned integer between 1 and INT_MAX"
            )
        values.append(value)
    return tuple(values)