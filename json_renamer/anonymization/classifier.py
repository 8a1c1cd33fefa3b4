import re

from json_renamer.anonymization.models import TokenClass
from json_renamer.words.months import is_month

_URL_RE = re.compile(r"https?://\S+")
_PERCENT_RE = re.compile(r"[0-9]+%")
# Leading numeric prefix, as accepted by a lenient float parser:
# "12abc" -> 12, ".5" -> 0.5, "Infinity" -> inf.
_FLOAT_PREFIX_RE = re.compile(
    r"\s*[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def classify(token: object) -> TokenClass:
    """Assign *token* to exactly one TokenClass; first matching rule wins."""
    if isinstance(token, str) and _URL_RE.fullmatch(token):
        return TokenClass.URL
    if not isinstance(token, str) or _is_numeric(token):
        return TokenClass.NUMERIC
    if token.strip() == "" or token.upper() == "N/A":
        return TokenClass.BLANK
    if is_month(token):
        return TokenClass.MONTH
    return TokenClass.GENERIC


def _is_numeric(token: str) -> bool:
    return bool(_FLOAT_PREFIX_RE.match(token) or _PERCENT_RE.fullmatch(token))
