"""
Translation Table

A read-only key -> text table for a single language, with lookup, search,
snapshot comparison and record translation.
"""
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from loguru import logger

from .comparison import ComparisonResult, compare_localizations
from .keys import (
    ATTACK_NAME_KEY,
    DRAGON_DESCRIPTION_KEY,
    DRAGON_NAME_KEY,
    GROUP_TYPE_FIELDS,
    ID_KEY_TEMPLATES,
    SKILL_DESCRIPTION_KEY,
    SKILL_NAME_KEY,
    TRANSLATABLE_KEYS,
    TranslatableField,
    format_key,
)
from .languages import language_code
from .text import NormalizeTextOptions, normalize_text


class Localization:
    """
    Translation table for one language.

    Usage:
        localization = await Localization.create("en")
        localization.get_dragon_name(1000)
        localization.translate({"tid_name": "tid_unit_1000_name", "hp": 100})
    """

    def __init__(self, language, data: Mapping[str, str]):
        """
        Args:
            language: LocalizationLanguage member or its code
            data: Flat key -> text mapping, copied and frozen
        """
        self.language = language
        self.data: Mapping[str, str] = MappingProxyType(dict(data))

    @property
    def url(self) -> str:
        """Source URL of this table's language"""
        from .loader import build_url
        return build_url(self.language)

    @classmethod
    def from_array(cls, language, array_data: List[Dict[str, str]]) -> "Localization":
        """Create from the wire format (a list of single-entry objects)"""
        from .loader import flatten_array_data
        return cls(language, flatten_array_data(array_data))

    @classmethod
    async def create(cls, language, client=None) -> "Localization":
        """Fetch and build the table for a language"""
        from .loader import create_localization
        return await create_localization(language, client=client)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Localization(language={language_code(self.language)!r}, entries={len(self.data)})"

    # Lookup

    def get_value_from_key(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def get_key_from_value(self, value: str) -> Optional[str]:
        """First key (in table order) whose text equals value"""
        for key, text in self.data.items():
            if text == value:
                return key
        return None

    def get_dragon_name(self, id: int) -> Optional[str]:
        return self.get_value_from_key(format_key(DRAGON_NAME_KEY, id))

    def get_dragon_description(self, id: int) -> Optional[str]:
        return self.get_value_from_key(format_key(DRAGON_DESCRIPTION_KEY, id))

    def get_attack_name(self, id: int) -> Optional[str]:
        return self.get_value_from_key(format_key(ATTACK_NAME_KEY, id))

    def get_skill_name(self, id: int) -> Optional[str]:
        return self.get_value_from_key(format_key(SKILL_NAME_KEY, id))

    def get_skill_description(self, id: int) -> Optional[str]:
        return self.get_value_from_key(format_key(SKILL_DESCRIPTION_KEY, id))

    # Search

    def search_keys(
        self,
        query: str,
        lower_case: bool = True,
        normalize_letters: bool = True,
        trim_spaces: bool = True,
    ) -> List[str]:
        """Keys whose normalized form contains the normalized query"""
        options = NormalizeTextOptions(lower_case, normalize_letters, trim_spaces)
        results = self._search(self.data.keys(), query, options)
        logger.debug(f"search_keys({query!r}) matched {len(results)} keys")
        return results

    def search_values(
        self,
        query: str,
        lower_case: bool = True,
        normalize_letters: bool = True,
        trim_spaces: bool = True,
    ) -> List[str]:
        """Texts whose normalized form contains the normalized query"""
        options = NormalizeTextOptions(lower_case, normalize_letters, trim_spaces)
        results = self._search(self.data.values(), query, options)
        logger.debug(f"search_values({query!r}) matched {len(results)} values")
        return results

    @staticmethod
    def _search(candidates, query: str, options: NormalizeTextOptions) -> List[str]:
        needle = normalize_text(query, options)
        return [text for text in candidates if needle in normalize_text(text, options)]

    # Serialization

    def to_object(self) -> Mapping[str, str]:
        return self.data

    def to_array(self) -> List[Dict[str, str]]:
        """Table in the wire format: one single-entry dict per key"""
        return [{key: value} for key, value in self.data.items()]

    # Comparison

    def compare(self, other: "Localization") -> ComparisonResult:
        """Diff this (old) table against other (new). Also usable as ``Localization.compare(old, new)``."""
        return compare_localizations(self, other)

    # Translation

    def translate(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Replace localization-key fields of a record with their texts.

        Alias fields (e.g. ``tid_name``, ``chestNameKey``, ``type_name_key``)
        whose value resolves in this table are removed and their text is
        stored under ``name``, ``type`` or ``description``. Unresolved
        aliases are kept as they are. Records of a group listed in
        ``ID_KEY_TEMPLATES`` additionally resolve missing texts from their
        ``id``.

        Returns:
            A new dict; the input record is not modified
        """
        translated: Dict[str, Any] = dict(record)
        resolved = set()

        for field_name, value in record.items():
            target = TRANSLATABLE_KEYS.get(field_name)
            if target is None or not isinstance(value, str):
                continue

            text = self.get_value_from_key(value)
            if text is not None:
                translated[target.value] = text
                del translated[field_name]
                resolved.add(target)

        templates = self._id_templates_for(record)
        if templates:
            for target, template in templates.items():
                if target in resolved:
                    continue
                text = self.get_value_from_key(format_key(template, record["id"]))
                if text is not None:
                    translated[target.value] = text

        return translated

    @staticmethod
    def _id_templates_for(record: Mapping[str, Any]) -> Optional[Mapping[TranslatableField, str]]:
        if record.get("id") is None:
            return None
        for group_field in GROUP_TYPE_FIELDS:
            group = record.get(group_field)
            if isinstance(group, str) and group in ID_KEY_TEMPLATES:
                return ID_KEY_TEMPLATES[group]
        return None
