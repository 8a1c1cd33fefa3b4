from json_renamer.anonymization.classifier import classify
from json_renamer.anonymization.models import TokenClass
from json_renamer.anonymization.registry import ReplacementRegistry


class WordReplacer:
    """Produces the substitute for a single token."""

    def __init__(self, registry: ReplacementRegistry) -> None:
        self._registry = registry

    def replace(self, token: str) -> str:
        token_class = classify(token)
        if token_class is TokenClass.MONTH:
            return self._registry.get_or_create(token, month=True)
        if token_class is TokenClass.GENERIC:
            return self._registry.get_or_create(token, month=False)
        return token
