from dataclasses import dataclass
from enum import Enum
from typing import Union

Document = Union[dict[str, "Document"], list["Document"], str, int, float, bool, None]


class TokenClass(Enum):
    """Replacement strategy for a single token, in precedence order."""

    URL = "url"
    NUMERIC = "numeric"
    BLANK = "blank"
    MONTH = "month"
    GENERIC = "generic"


@dataclass
class AnonymizationResult:
    """Output of one anonymization run."""

    anonymized_text: str
    document: Document
    replacements: int = 0  # distinct tokens given a replacement
