from faker import Faker

from json_renamer.words.base import BaseWordSource
from json_renamer.words.exceptions import WordSourceError


class FakerWordSource(BaseWordSource):
    """Draws lorem words from Faker."""

    def __init__(self, locale: str = "en_US", seed: int | None = None) -> None:
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)

    def next(self) -> str:
        try:
            word = self._faker.word()
        except Exception as exc:
            raise WordSourceError(f"Faker word generation failed: {exc}") from exc
        if not word:
            raise WordSourceError("Faker returned an empty word")
        return word
