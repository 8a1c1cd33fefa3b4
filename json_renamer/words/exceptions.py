class WordSourceError(Exception):
    """Raised when a word source cannot produce a replacement word."""
