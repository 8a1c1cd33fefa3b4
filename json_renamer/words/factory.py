from collections.abc import Callable

from json_renamer.config.settings import Settings
from json_renamer.words.base import BaseWordSource
from json_renamer.words.example_adapter import ExampleWordSource
from json_renamer.words.faker_adapter import FakerWordSource


class WordSourceFactory:
    """Creates the configured word source adapter."""

    ADAPTERS: dict[str, Callable[[Settings], BaseWordSource]] = {
        "faker": lambda settings: FakerWordSource(
            locale=settings.faker_locale,
            seed=settings.random_seed,
        ),
        "example": lambda settings: ExampleWordSource(),
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseWordSource:
        name = settings.word_source.lower()
        build = cls.ADAPTERS.get(name)
        if build is None:
            raise ValueError(
                f"Unknown word source '{name}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return build(settings)
