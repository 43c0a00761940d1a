"""
Text normalization used by table search
"""
import re
import unicodedata
from dataclasses import dataclass

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


@dataclass(frozen=True)
class NormalizeTextOptions:
    """Independently toggleable normalization steps"""
    lower_case: bool = True
    normalize_letters: bool = True  # strip accents
    trim_spaces: bool = True


DEFAULT_OPTIONS = NormalizeTextOptions()


def normalize_text(text: str, options: NormalizeTextOptions = DEFAULT_OPTIONS) -> str:
    """
    Normalize text for accent- and case-insensitive matching.

    Steps run in order: lower-case, NFD decomposition with combining
    marks removed, whitespace trim.
    """
    result = text

    if options.lower_case:
        result = result.lower()
    if options.normalize_letters:
        result = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", result))
    if options.trim_spaces:
        result = result.strip()

    return result
