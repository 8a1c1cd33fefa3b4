class AnonymizationError(Exception):
    """Base exception for all anonymization errors."""


class EmptyInputError(AnonymizationError):
    """Raised when the input text is empty after trimming whitespace."""


class ParseError(AnonymizationError):
    """Raised when the input text is not well-formed JSON."""
