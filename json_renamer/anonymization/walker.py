from json_renamer.anonymization.models import Document
from json_renamer.anonymization.replacer import WordReplacer

TOKEN_SEPARATOR = " "


class DocumentWalker:
    """Rebuilds a JSON value with every string leaf anonymized.

    Containers keep their shape: objects keep their keys and key order,
    arrays keep their length and order. Numbers, booleans and null pass
    through untouched.
    """

    def __init__(self, replacer: WordReplacer) -> None:
        self._replacer = replacer

    def walk(self, value: Document) -> Document:
        if isinstance(value, dict):
            return {key: self.walk(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self.walk(item) for item in value]
        if isinstance(value, str):
            return self.walk_string(value)
        return value

    def walk_string(self, value: str) -> str:
        """Replace each space-separated token of *value*.

        Splitting on a single space keeps empty tokens between repeated
        spaces, so the original spacing survives the rejoin.
        """
        tokens = value.split(TOKEN_SEPARATOR)
        return TOKEN_SEPARATOR.join(self._replacer.replace(token) for token in tokens)
