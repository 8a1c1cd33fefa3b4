"""Example word source.

Use this module as a reference when implementing new word sources.
Implement BaseWordSource and register the name in WordSourceFactory.
"""

from itertools import cycle
from typing import ClassVar

from json_renamer.words.base import BaseWordSource
from json_renamer.words.exceptions import WordSourceError


class ExampleWordSource(BaseWordSource):
    """Deterministic source cycling through a fixed word list.

    No randomness. Useful for local development, tests, and reproducible
    sample output.
    """

    DEFAULT_WORDS: ClassVar[tuple[str, ...]] = (
        "amber",
        "basil",
        "cedar",
        "delta",
        "ember",
        "fable",
        "gusto",
        "haven",
    )

    def __init__(self, words: list[str] | tuple[str, ...] | None = None) -> None:
        pool = tuple(words) if words is not None else self.DEFAULT_WORDS
        if not pool:
            raise WordSourceError("ExampleWordSource needs at least one word")
        self._words = cycle(pool)

    def next(self) -> str:
        return next(self._words)
