from json_renamer.words.base import BaseWordSource
from json_renamer.words.example_adapter import ExampleWordSource
from json_renamer.words.factory import WordSourceFactory
from json_renamer.words.faker_adapter import FakerWordSource

__all__ = ["BaseWordSource", "ExampleWordSource", "FakerWordSource", "WordSourceFactory"]
