import random

import pytest

from json_renamer.anonymization.registry import ReplacementRegistry
from json_renamer.anonymization.replacer import WordReplacer
from json_renamer.anonymization.walker import DocumentWalker
from json_renamer.words.example_adapter import ExampleWordSource


@pytest.fixture()
def word_source() -> ExampleWordSource:
    """Deterministic source: amber, basil, cedar, delta, ..."""
    return ExampleWordSource()


@pytest.fixture()
def registry(word_source: ExampleWordSource) -> ReplacementRegistry:
    return ReplacementRegistry(word_source, rng=random.Random(1234))


@pytest.fixture()
def replacer(registry: ReplacementRegistry) -> WordReplacer:
    return WordReplacer(registry)


@pytest.fixture()
def walker(replacer: WordReplacer) -> DocumentWalker:
    return DocumentWalker(replacer)
