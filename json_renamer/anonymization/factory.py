from json_renamer.anonymization.anonymizer import Anonymizer
from json_renamer.anonymization.base import BaseAnonymizer
from json_renamer.config.settings import Settings
from json_renamer.words.factory import WordSourceFactory


class AnonymizerFactory:
    """Creates the configured anonymizer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseAnonymizer:
        return Anonymizer(
            WordSourceFactory.create(settings),
            seed=settings.random_seed,
            indent=settings.output_indent,
        )
