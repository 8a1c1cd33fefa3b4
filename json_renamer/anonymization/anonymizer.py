"""Structure-preserving JSON anonymizer.

Processing flow:
1. Reject blank input.
2. Parse strict JSON (no NaN/Infinity constants).
3. Walk the document with a fresh replacement registry: every string leaf
   is split on spaces and each token is classified as URL, numeric,
   blank/N/A, month or generic word.
4. Month tokens get a random month name, generic words a capitalized
   synthetic word; the same original token always gets the same stand-in
   within the run.
5. Serialize the rebuilt document as indented JSON.
"""

from __future__ import annotations

import json
import math
import random

from json_renamer.anonymization.base import BaseAnonymizer
from json_renamer.anonymization.exceptions import (
    AnonymizationError,
    EmptyInputError,
    ParseError,
)
from json_renamer.anonymization.models import AnonymizationResult, Document
from json_renamer.anonymization.registry import ReplacementRegistry
from json_renamer.anonymization.replacer import WordReplacer
from json_renamer.anonymization.walker import DocumentWalker
from json_renamer.logging.logger import Log
from json_renamer.words.base import BaseWordSource
from json_renamer.words.faker_adapter import FakerWordSource


class Anonymizer(BaseAnonymizer):
    """Anonymizes JSON text; each call is an independent run."""

    DEFAULT_INDENT = 2

    def __init__(
        self,
        word_source: BaseWordSource | None = None,
        *,
        seed: int | None = None,
        indent: int = DEFAULT_INDENT,
    ) -> None:
        self._word_source = word_source if word_source is not None else FakerWordSource(seed=seed)
        self._rng = random.Random(seed)
        self._indent = indent

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(self, text: str) -> AnonymizationResult:
        try:
            return self._run(text)
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Anonymization failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _run(self, text: str) -> AnonymizationResult:
        if not text.strip():
            raise EmptyInputError("Input is empty.")

        document = self._parse(text)
        Log.debug(f"Parsed {len(text)} chars of JSON, starting run")

        registry = ReplacementRegistry(self._word_source, rng=self._rng)
        walker = DocumentWalker(WordReplacer(registry))
        anonymized = walker.walk(document)

        Log.info(f"Anonymized: {len(registry)} distinct tokens replaced")
        return AnonymizationResult(
            anonymized_text=json.dumps(anonymized, indent=self._indent, ensure_ascii=False),
            document=anonymized,
            replacements=len(registry),
        )

    @staticmethod
    def _parse(text: str) -> Document:
        try:
            return json.loads(
                text,
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except ValueError as exc:
            raise ParseError(str(exc)) from exc


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def anonymize(text: str, word_source: BaseWordSource | None = None) -> str:
    """Anonymize *text* and return the indented JSON output."""
    return Anonymizer(word_source).anonymize(text).anonymized_text
