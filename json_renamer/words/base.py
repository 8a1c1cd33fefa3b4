from abc import ABC, abstractmethod


class BaseWordSource(ABC):
    """Contract for all replacement word generators."""

    @abstractmethod
    def next(self) -> str:
        """Produce one pronounceable word.

        Returns:
            A non-empty word. Casing is not significant; the registry
            stores it lower-case.

        Raises:
            WordSourceError: if no word can be produced.
        """
