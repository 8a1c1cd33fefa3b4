"""Fixed English month calendar.

Kept independent of the process locale so classification and replacement
behave the same on every machine.
"""

import random

MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_FULL_NAMES = frozenset(name.lower() for name in MONTHS)
_ABBREVIATIONS = frozenset(name[:3].lower() for name in MONTHS)


def is_month(token: str) -> bool:
    """Return True if *token* strictly names a month.

    Accepted forms: full name or three-letter abbreviation (any case),
    zero-padded ``MM`` (``01``..``12``) and unpadded ``M`` (``1``..``12``).
    """
    if token.isascii() and token.isdigit():
        if len(token) == 2:
            return 1 <= int(token) <= 12
        if len(token) == 1:
            return token != "0"
        return False
    lowered = token.lower()
    return lowered in _FULL_NAMES or lowered in _ABBREVIATIONS


def random_month(rng: random.Random | None = None) -> str:
    """Pick a month name uniformly at random."""
    return (rng or random).choice(MONTHS)
