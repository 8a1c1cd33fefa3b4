from abc import ABC, abstractmethod

from json_renamer.anonymization.models import AnonymizationResult


class BaseAnonymizer(ABC):
    """Contract for all JSON anonymizers."""

    @abstractmethod
    def anonymize(self, text: str) -> AnonymizationResult:
        """Replace natural-language words in a JSON document.

        Args:
            text: Raw JSON text.

        Returns:
            AnonymizationResult with pretty-printed JSON and the rebuilt
            document.

        Raises:
            EmptyInputError: if *text* is blank.
            ParseError: if *text* is not valid JSON.
            AnonymizationError: on any other failure.
        """
