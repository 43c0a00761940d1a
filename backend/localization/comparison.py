"""
Snapshot Comparison

Diffs two translation tables of the same language into new, edited and
deleted keys.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from loguru import logger

from .languages import language_code


class LanguageMismatchError(ValueError):
    """Raised when comparing tables of different languages"""

    def __init__(self, expected, actual):
        self.expected = language_code(expected)
        self.actual = language_code(actual)
        super().__init__(f"Languages do not match: {self.expected} != {self.actual}")


@dataclass
class NewField:
    key: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass
class EditedFieldValues:
    old: str
    new: str


@dataclass
class EditedField:
    key: str
    values: EditedFieldValues

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "values": {"old": self.values.old, "new": self.values.new}}


@dataclass
class DeletedField:
    key: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass
class ComparisonResult:
    """Result of comparing an old table snapshot with a new one"""
    new_fields: List[NewField] = field(default_factory=list)
    edited_fields: List[EditedField] = field(default_factory=list)
    deleted_fields: List[DeletedField] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.new_fields) + len(self.edited_fields) + len(self.deleted_fields)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def summary(self) -> str:
        """Get human-readable summary"""
        return (
            f"{len(self.new_fields)} new, {len(self.edited_fields)} edited, "
            f"{len(self.deleted_fields)} deleted"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase shape used by the JSON tooling"""
        return {
            "newFields": [f.to_dict() for f in self.new_fields],
            "editedFields": [f.to_dict() for f in self.edited_fields],
            "deletedFields": [f.to_dict() for f in self.deleted_fields],
        }


def compare_mappings(old: Mapping[str, str], new: Mapping[str, str]) -> ComparisonResult:
    """Diff two raw key-value mappings. Values are compared exactly."""
    result = ComparisonResult()

    for key, value in new.items():
        if key not in old:
            result.new_fields.append(NewField(key=key, value=value))
        elif old[key] != value:
            result.edited_fields.append(
                EditedField(key=key, values=EditedFieldValues(old=old[key], new=value))
            )

    for key, value in old.items():
        if key not in new:
            result.deleted_fields.append(DeletedField(key=key, value=value))

    return result


def compare_localizations(old, new) -> ComparisonResult:
    """
    Compare two Localization snapshots.

    Args:
        old: Previous table
        new: Current table

    Raises:
        LanguageMismatchError: if the tables are for different languages
    """
    if language_code(old.language) != language_code(new.language):
        raise LanguageMismatchError(old.language, new.language)

    result = compare_mappings(old.to_object(), new.to_object())
    logger.debug(f"Compared '{language_code(new.language)}' tables: {result.summary}")
    return result
