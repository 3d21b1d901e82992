"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

_WHITESPACE = " \t\n\v\f\r"


class SettingsError(ValueError):
    """Raised when the simulation arguments are missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    amount: int
    die_time: int
    eat_time: int
    sleep_time: int
    meals: Optional[int] = None


def atoi(text: str) -> int:
    """Parse a leading decimal integer leniently, returning 0 when none is found.

    Leading whitespace is skipped and one sign is accepted; a second sign
    makes the whole value 0. Parsing stops at the first non-digit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
        if rest[:1] in ("+", "-"):
            return 0
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the four or five program arguments.

    The arguments are the number of philosophers, the time to die, the time
    to eat, the time to sleep and, optionally, how many meals each must eat.
    """
    if len(args) not in (4, 5):
        raise SettingsError("Bad arguments")
    amount, die_time, eat_time, sleep_time = (atoi(arg) for arg in args[:4])
    meals = atoi(args[4]) if len(args) == 5 else None
    if min(amount, die_time, eat_time, sleep_time) <= 0:
        raise SettingsError("Init failed")
    if meals is not None and meals <= 0:
        raise SettingsError("Init failed")
    return Settings(amount, die_time, eat_time, sleep_time, meals)