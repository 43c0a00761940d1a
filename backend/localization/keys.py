"""
Translatable Field Tables

Records coming from the game config use either snake_case or camelCase
field names depending on their source, so every alias is listed in both
spellings.
"""
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


class TranslatableField(str, Enum):
    """Human-readable fields produced by translation"""
    NAME = "name"
    TYPE = "type"
    DESCRIPTION = "description"


SNAKE_CASE_KEYS_TO_TRANSLATE: Mapping[TranslatableField, Tuple[str, ...]] = MappingProxyType({
    TranslatableField.NAME: ("tid_name", "chest_name_key", "name_key", "island_title_tid"),
    TranslatableField.TYPE: ("type_name_key",),
    TranslatableField.DESCRIPTION: ("description_key", "tid_description"),
})

CAMEL_CASE_KEYS_TO_TRANSLATE: Mapping[TranslatableField, Tuple[str, ...]] = MappingProxyType({
    TranslatableField.NAME: ("tidName", "chestNameKey", "nameKey", "islandTitleTid"),
    TranslatableField.TYPE: ("typeNameKey",),
    TranslatableField.DESCRIPTION: ("descriptionKey", "tidDescription"),
})


def _build_alias_table() -> Mapping[str, TranslatableField]:
    table: Dict[str, TranslatableField] = {}
    for aliases in (SNAKE_CASE_KEYS_TO_TRANSLATE, CAMEL_CASE_KEYS_TO_TRANSLATE):
        for target, names in aliases.items():
            for name in names:
                table[name] = target
    return MappingProxyType(table)


# alias field name -> target field
TRANSLATABLE_KEYS: Mapping[str, TranslatableField] = _build_alias_table()

NAME_KEYS_TO_TRANSLATE = tuple(k for k, v in TRANSLATABLE_KEYS.items() if v is TranslatableField.NAME)
TYPE_NAME_KEYS_TO_TRANSLATE = tuple(k for k, v in TRANSLATABLE_KEYS.items() if v is TranslatableField.TYPE)
DESCRIPTION_KEYS_TO_TRANSLATE = tuple(
    k for k, v in TRANSLATABLE_KEYS.items() if v is TranslatableField.DESCRIPTION
)

# Key templates, interpolated with a numeric id
DRAGON_NAME_KEY = "tid_unit_{id}_name"
DRAGON_DESCRIPTION_KEY = "tid_unit_{id}_description"
ATTACK_NAME_KEY = "tid_attack_name_{id}"
SKILL_NAME_KEY = "tid_skill_name_{id}"
SKILL_DESCRIPTION_KEY = "tid_skill_description_{id}"

# Records whose group has no alias fields get their texts from the id
GROUP_TYPE_FIELDS = ("group_type", "groupType")
ID_KEY_TEMPLATES: Mapping[str, Mapping[TranslatableField, str]] = MappingProxyType({
    "DRAGON": MappingProxyType({
        TranslatableField.NAME: DRAGON_NAME_KEY,
        TranslatableField.DESCRIPTION: DRAGON_DESCRIPTION_KEY,
    }),
})


def format_key(template: str, id) -> str:
    """Interpolate an id into a key template"""
    return template.format(id=id)
