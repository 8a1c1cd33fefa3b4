import random
import threading

from json_renamer.words.base import BaseWordSource
from json_renamer.words.months import random_month


def capitalize_first(word: str) -> str:
    """Upper-case the first character only; the rest is left as is."""
    return word[:1].upper() + word[1:]


class ReplacementRegistry:
    """Per-run mapping from original token to its replacement.

    A key, once set, is never overwritten. Generic words are stored
    lower-case and capitalized on every lookup; month names are stored and
    returned verbatim.
    """

    def __init__(
        self,
        word_source: BaseWordSource,
        rng: random.Random | None = None,
    ) -> None:
        self._word_source = word_source
        self._rng = rng or random.Random()
        self._replacements: dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._replacements)

    def __contains__(self, original: object) -> bool:
        return original in self._replacements

    def get_or_create(self, original: str, month: bool) -> str:
        with self._lock:
            stored = self._replacements.get(original)
            if stored is None:
                stored = random_month(self._rng) if month else self._word_source.next().lower()
                self._replacements[original] = stored
        return stored if month else capitalize_first(stored)
