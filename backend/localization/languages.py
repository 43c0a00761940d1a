"""
Supported localization languages
"""
from enum import Enum


class LocalizationLanguage(str, Enum):
    """Locale codes for which translation tables are published"""
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    TURKISH = "tr"
    DUTCH = "nl"
    CATALAN = "ca"
    POLISH = "pl"
    JAPANESE = "ja"
    KOREAN = "ko"
    CHINESE = "zh"
    THAI = "th"
    INDONESIAN = "id"


def language_code(language) -> str:
    """Plain string code for an enum member or a raw tag"""
    if isinstance(language, LocalizationLanguage):
        return language.value
    return str(language)
