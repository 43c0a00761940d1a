"""
Localization Package

Provides:
- Single-language translation tables with lookup and normalized search
- Snapshot comparison between two tables of the same language
- Record translation from localization-key fields to readable texts
- Loader for the published JSON tables
"""
from .languages import LocalizationLanguage
from .keys import TRANSLATABLE_KEYS, TranslatableField
from .text import NormalizeTextOptions, normalize_text
from .comparison import (
    ComparisonResult,
    DeletedField,
    EditedField,
    EditedFieldValues,
    LanguageMismatchError,
    NewField,
)
from .localization import Localization
from .loader import (
    LocalizationFetchError,
    build_url,
    create_localization,
    fetch_localization,
    flatten_array_data,
)

__all__ = [
    "LocalizationLanguage",
    "TRANSLATABLE_KEYS",
    "TranslatableField",
    "NormalizeTextOptions",
    "normalize_text",
    "ComparisonResult",
    "NewField",
    "EditedField",
    "EditedFieldValues",
    "DeletedField",
    "LanguageMismatchError",
    "Localization",
    "LocalizationFetchError",
    "build_url",
    "create_localization",
    "fetch_localization",
    "flatten_array_data",
]
